"""Domain models for photo queries."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class Scope(StrEnum):
    """Which pool of photos a query draws from."""

    ALL = "all"
    FEATURED = "featured"


class RandomizationInterval(StrEnum):
    """How often a random photo result is expected to change."""

    PER_REQUEST = "perRequest"
    DAILY = "daily"
    WEEKLY = "weekly"

    @classmethod
    def parse(cls, value: object) -> "RandomizationInterval":
        """Return the matching interval, falling back to per request."""
        if value == cls.DAILY:
            return cls.DAILY
        if value == cls.WEEKLY:
            return cls.WEEKLY
        return cls.PER_REQUEST


class Dimensions(BaseModel):
    """Requested photo size; the service crops to keep the aspect ratio."""

    width: int | None = None
    height: int | None = None

    model_config = ConfigDict(validate_assignment=True)

    @property
    def is_complete(self) -> bool:
        """Return True when both sides are set and non-zero."""
        return bool(self.width) and bool(self.height)

    def as_segment(self) -> str:
        """Return the `<width>x<height>` path segment."""
        return f"{self.width}x{self.height}"


class Selector(StrEnum):
    """Path prefix for the field that narrows a query, in precedence order."""

    # The id itself is the path, so it has no prefix.
    ID = ""
    USER = "user"
    CATEGORY = "category"
    COLLECTION = "collection"
