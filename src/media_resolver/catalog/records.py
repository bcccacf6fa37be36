"""
Pydantic views over raw catalog records.

Movie records use ``title``/``release_date``; TV records use
``name``/``first_air_date``. Unknown fields are ignored.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class CatalogRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    title: Optional[str] = None
    name: Optional[str] = None
    release_date: Optional[str] = None
    first_air_date: Optional[str] = None
    vote_average: Optional[float] = None
    poster_path: Optional[str] = None

    @field_validator("vote_average", mode="before")
    @classmethod
    def _lenient_rating(cls, value):
        if value is None or isinstance(value, bool):
            return None
        try:
            return float(value)
        except (TypeError, ValueError):
            return None

    @property
    def display_title(self) -> str:
        return self.title or self.name or ""

    @property
    def air_date(self) -> str:
        return self.release_date or self.first_air_date or ""


class KeywordRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    name: Optional[str] = None
