"""
Exact lookup of candidate titles in the curated concept table.
"""
from typing import Mapping, Optional

from ..canonicalizer import normalize_title
from ..concepts import CONCEPT_TABLE
from ..models import ConceptEntry


class ConceptResolver:
    """
    Resolves a title to a curated concept by exact normalized-key match.

    No fuzzy matching: a miss means the caller falls through to a live
    catalog lookup.
    """

    def __init__(self, concepts: Mapping[str, ConceptEntry] = CONCEPT_TABLE):
        self._concepts = concepts

    def resolve(self, title: str) -> Optional[ConceptEntry]:
        key = normalize_title(title)
        if not key:
            return None
        return self._concepts.get(key)
