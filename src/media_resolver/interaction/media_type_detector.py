"""
Media type detection from type keywords.
"""
from ..models import MediaType
from ..vocabulary import MOVIE_TYPE_KEYWORDS, TV_TYPE_KEYWORDS


class MediaTypeDetector:
    """
    Classifies a message as targeting movies, TV, or neither.

    Literal substring checks on lower-cased text: any TV keyword wins,
    otherwise a movie keyword gives MOVIE, otherwise NEUTRAL.
    """

    def detect(self, text: str) -> MediaType:
        if any(keyword in text for keyword in TV_TYPE_KEYWORDS):
            return MediaType.TV
        if not any(keyword in text for keyword in MOVIE_TYPE_KEYWORDS):
            return MediaType.NEUTRAL
        return MediaType.MOVIE
