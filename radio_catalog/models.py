from typing import List, Optional

from pydantic import BaseModel, ConfigDict

DEFAULT_GENRE = "Christian"
DEFAULT_RATING = 4


class RawStationRecord(BaseModel):
    """One station as returned by the directory search endpoint."""

    name: Optional[str] = None
    url_resolved: Optional[str] = None
    favicon: Optional[str] = None
    homepage: Optional[str] = None
    tags: Optional[str] = None
    country: Optional[str] = None

    @property
    def display_name(self) -> str:
        return (self.name or "").strip()

    @property
    def genre(self) -> str:
        first_tag = (self.tags or "").split(",")[0].strip()
        return first_tag or DEFAULT_GENRE


class CatalogEntry(BaseModel):
    name: str
    description: str
    src: str
    logo: str
    tags: List[str] = ["", ""]
    rating: int = DEFAULT_RATING
    categories: List[str] = [DEFAULT_GENRE]

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_record(cls, record: RawStationRecord, logo: str) -> "CatalogEntry":
        return cls(
            name=record.display_name,
            description=f"Christian radio station from {record.country or 'Unknown'}.",
            src=record.url_resolved,
            logo=logo,
            categories=[record.genre],
        )


class ImageResult(BaseModel):
    """
    Outcome of an image fetch. Falsy on failure so callers that only need
    "got a logo or not" can test it directly; `reason` tells the failures apart.
    """

    reference: str = ""
    reason: str = ""

    def __bool__(self) -> bool:
        return bool(self.reference)

    @classmethod
    def failed(cls, reason: str) -> "ImageResult":
        return cls(reason=reason)
