"""
Projection of raw catalog records onto ResultItem.

Caps the result count, tags TV items, and optionally drops the source title
from similarity results. Catalog payloads are never mutated.
"""
import logging
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError

from .canonicalizer import normalize_title
from .catalog.records import CatalogRecord
from .models import MediaType, RATING_NOT_AVAILABLE, ResultItem
from .schemas import MAX_REPLY_ITEMS

logger = logging.getLogger(__name__)


class ResultNormalizer:

    def __init__(self, limit: int = MAX_REPLY_ITEMS):
        if not 1 <= limit <= MAX_REPLY_ITEMS:
            raise ValueError(f"limit must be between 1 and {MAX_REPLY_ITEMS}, got {limit}")
        self.limit = limit

    def normalize(
        self,
        records: Iterable[Dict[str, Any]],
        media_type: MediaType,
        exclude_title: Optional[str] = None,
    ) -> List[ResultItem]:
        """
        Truncate to the first ``limit`` records, then project them.

        :param records: Raw catalog records in catalog order
        :param media_type: Resolved media type of the call that produced them
        :param exclude_title: Drop items whose normalized title equals this one's
        :return: List of ResultItem, at most ``limit`` long
        """
        head = list(records)[: self.limit]
        items = [item for item in (self.to_item(r, media_type) for r in head) if item]

        if exclude_title:
            excluded = normalize_title(exclude_title)
            items = [item for item in items if normalize_title(item.title) != excluded]

        return items

    def to_item(self, record: Dict[str, Any], media_type: MediaType) -> Optional[ResultItem]:
        try:
            parsed = CatalogRecord.model_validate(record)
        except ValidationError as e:
            logger.debug(f"Skipping malformed catalog record: {e.error_count()} error(s)")
            return None

        return ResultItem(
            id=parsed.id,
            title=parsed.display_title,
            poster_path=parsed.poster_path,
            rating=format_rating(parsed.vote_average),
            year=parsed.air_date[:4],
            media_type=MediaType.TV.value if media_type is MediaType.TV else None,
        )


def format_rating(vote_average: Optional[float]) -> str:
    if vote_average is None:
        return RATING_NOT_AVAILABLE
    return f"{vote_average:.1f}"
