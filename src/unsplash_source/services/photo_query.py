"""Fluent builder for Unsplash Source photo URLs."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from pydantic import TypeAdapter

from unsplash_source.app_logging import configure_logging
from unsplash_source.config import DEFAULT_BASE_URL, Settings
from unsplash_source.domain.keywords import encode_keywords
from unsplash_source.domain.photo import (
    Dimensions,
    RandomizationInterval,
    Scope,
    Selector,
)

_logger = logging.getLogger(__name__)

_INT = TypeAdapter(int)


@dataclass
class PhotoQuery:
    """Accumulates photo filters through chained calls and builds the URL.

    Every setter returns the query itself, so a URL reads as one expression:

        PhotoQuery().featured().size(200).of("beach").fetch()

    Only one selector (id, user, category or collection) shapes the path.
    When several are set, the first in that order wins.
    """

    base_url: str = DEFAULT_BASE_URL
    dimensions: Dimensions = field(default_factory=Dimensions)
    scope: Scope = Scope.ALL
    randomization_interval: RandomizationInterval = RandomizationInterval.PER_REQUEST
    photo_id: int | None = None
    username: str | None = None
    category: str | None = None
    collection_id: str | None = None
    keywords: str = ""

    def __post_init__(self) -> None:
        self.base_url = self.base_url.rstrip("/")

    @classmethod
    def create(cls, settings: Settings | None = None) -> "PhotoQuery":
        """Create a query rooted at the configured service URL.

        Also configures package logging at the configured level.
        """
        resolved_settings = settings or Settings()
        configure_logging(resolved_settings.log_level)
        return cls(base_url=resolved_settings.source_base_url)

    def find(self, photo_id: int | None) -> "PhotoQuery":
        """Select a specific photo by its public id."""
        self.photo_id = None if photo_id is None else _INT.validate_python(photo_id)
        return self

    def width(self, width: int) -> "PhotoQuery":
        """Set the photo width."""
        self.dimensions.width = width
        return self

    def height(self, height: int) -> "PhotoQuery":
        """Set the photo height."""
        self.dimensions.height = height
        return self

    def size(self, width: int, height: int | None = None) -> "PhotoQuery":
        """Set both dimensions; a missing height makes the photo square."""
        self.dimensions = Dimensions(width=width, height=height or width)
        return self

    def randomize(self, interval: str | None = None) -> "PhotoQuery":
        """Set how often the random photo changes.

        Only ``daily`` and ``weekly`` are recognised. Any other value
        resets the interval to a fresh photo per request.
        """
        self.randomization_interval = RandomizationInterval.parse(interval)
        return self

    def featured(self) -> "PhotoQuery":
        """Restrict results to curated photos."""
        self.scope = Scope.FEATURED
        return self

    def of(self, keywords: str | Sequence[str]) -> "PhotoQuery":
        """Limit photos to tags or locations matching the keywords.

        Accepts a comma separated string or a list of strings.
        """
        self.keywords = encode_keywords(keywords)
        return self

    def from_user(self, username: str) -> "PhotoQuery":
        """Limit photos to a single photographer."""
        self.username = username
        return self

    def from_category(self, category: str) -> "PhotoQuery":
        """Limit photos to a category."""
        self.category = category
        return self

    def from_collection(self, collection_id: str | int | None) -> "PhotoQuery":
        """Limit photos to a collection."""
        self.collection_id = str(collection_id) if collection_id else None
        return self

    def selector(self) -> tuple[Selector, object] | None:
        """Return the selector that shapes the path, if any."""
        candidates = (
            (Selector.ID, self.photo_id),
            (Selector.USER, self.username),
            (Selector.CATEGORY, self.category),
            (Selector.COLLECTION, self.collection_id),
        )
        for kind, value in candidates:
            if value:
                return kind, value
        return None

    def fetch(self) -> str:
        """Build the photo URL from the accumulated filters."""
        segments: list[str] = []
        selected = self.selector()

        if selected is not None and selected[0] is Selector.ID:
            segments.append(str(selected[1]))
            self._append_dimensions(segments)
            return self._join(segments, keywords="")

        if selected is not None:
            kind, value = selected
            segments.extend([kind.value, str(value)])
        self._append_scope(segments)
        self._append_dimensions(segments)
        self._append_randomization(segments, include_random=selected is None)
        return self._join(segments, keywords=self.keywords)

    @property
    def url(self) -> str:
        """Return the photo URL."""
        return self.fetch()

    def _append_scope(self, segments: list[str]) -> None:
        if self.scope == Scope.FEATURED:
            segments.append(Scope.FEATURED.value)

    def _append_dimensions(self, segments: list[str]) -> None:
        if self.dimensions.is_complete:
            segments.append(self.dimensions.as_segment())
        elif self.dimensions.width or self.dimensions.height:
            _logger.debug(
                "Ignoring partial dimensions: width=%s height=%s",
                self.dimensions.width,
                self.dimensions.height,
            )

    def _append_randomization(self, segments: list[str], include_random: bool) -> None:
        # Selector paths are random by default; only the bare path needs /random.
        interval = self.randomization_interval
        if interval == RandomizationInterval.PER_REQUEST:
            if include_random:
                segments.append("random")
            return
        segments.append(RandomizationInterval(interval).value)

    def _join(self, segments: list[str], keywords: str) -> str:
        url = "/".join([self.base_url, *segments])
        if keywords:
            url = f"{url}?{keywords}"
        _logger.debug("Built photo URL: %s", url)
        return url
