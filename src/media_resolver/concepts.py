"""
Curated concept table.

Maps well-known titles (keyed by their normalized form) to the genres and
flavor text used to build "similar to" discovery queries without a live
recommendation call.
"""
from types import MappingProxyType
from typing import Mapping

from .canonicalizer import normalize_title
from .models import ConceptEntry, MediaType


_CONCEPTS = {
    # TV series
    "dark": ConceptEntry(
        canonical_id=70523,
        media_type=MediaType.TV,
        genre_ids=(9648, 10765, 18),
        keyword_expression="time travel|paradox|parallel world|mystery|mind-bending",
        description="mind-bending sci-fi mysteries involving time travel and parallel worlds",
    ),
    "stranger things": ConceptEntry(
        canonical_id=66732,
        media_type=MediaType.TV,
        genre_ids=(10765, 9648, 18),
        keyword_expression="supernatural|monster|80s|mystery",
        description="supernatural mysteries with retro vibes and monsters",
    ),
    "breaking bad": ConceptEntry(
        canonical_id=1396,
        media_type=MediaType.TV,
        genre_ids=(80, 18),
        keyword_expression="drug lord|crime|anti hero|cartel",
        description="intense crime dramas featuring complex anti-heroes",
    ),
    "game of thrones": ConceptEntry(
        canonical_id=1399,
        media_type=MediaType.TV,
        genre_ids=(10765, 18, 10759),
        keyword_expression="kingdom|politics|dragon|war",
        description="epic fantasy sagas with political intrigue and war",
    ),
    "black mirror": ConceptEntry(
        canonical_id=42009,
        media_type=MediaType.TV,
        genre_ids=(10765, 18, 9648),
        keyword_expression="dystopia|technology|future|satire",
        description="thought-provoking dystopian stories about technology",
    ),
    "the boys": ConceptEntry(
        canonical_id=76479,
        media_type=MediaType.TV,
        genre_ids=(10765, 10759),
        keyword_expression="superhero|satire|dark comedy|violent",
        description="gritty, satirical takes on the superhero genre",
    ),
    # Movies
    "inception": ConceptEntry(
        canonical_id=27205,
        media_type=MediaType.MOVIE,
        genre_ids=(28, 878, 12),
        keyword_expression="dream|heist|mind-bending|reality",
        description="complex sci-fi blockbusters dealing with reality and dreams",
    ),
    "interstellar": ConceptEntry(
        canonical_id=157336,
        media_type=MediaType.MOVIE,
        genre_ids=(12, 18, 878),
        keyword_expression="space|black hole|time dilation|father daughter",
        description="epic space exploration movies with emotional cores",
    ),
    "parasite": ConceptEntry(
        canonical_id=496243,
        media_type=MediaType.MOVIE,
        genre_ids=(35, 53, 18),
        keyword_expression="class struggle|social commentary|twist",
        description="sharp social thrillers with dark humor and twists",
    ),
    "joker": ConceptEntry(
        canonical_id=475557,
        media_type=MediaType.MOVIE,
        genre_ids=(80, 53, 18),
        keyword_expression="psychological|clown|descent|mental health",
        description="dark psychological character studies",
    ),
    "avengers": ConceptEntry(
        canonical_id=299534,  # Endgame
        media_type=MediaType.MOVIE,
        genre_ids=(28, 12, 878),
        keyword_expression="superhero|team|comic book|alien invasion",
        description="massive superhero team-up events",
    ),
    "bahubali": ConceptEntry(
        canonical_id=256040,
        media_type=MediaType.MOVIE,
        genre_ids=(28, 12, 18),
        keyword_expression="epic|war|kingdom|mythology",
        description="grand epic action movies with war and mythology",
    ),
}

for _key in _CONCEPTS:
    if normalize_title(_key) != _key:
        raise ValueError(f"Concept key is not normalized: {_key!r}")

CONCEPT_TABLE: Mapping[str, ConceptEntry] = MappingProxyType(_CONCEPTS)
