from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ShortURLModel:
    """Represent a shortened URL record.

    Instances are immutable snapshots handed out by the registry. The registry
    is the only owner of the live record; bumping the access count produces a
    new snapshot rather than mutating an old one.

    Attributes:
        id (int):
            Unique sequential identifier, starting at 1 and never reused.
        target (str):
            The normalized original long URL the shortcode redirects to.
        shortcode (str):
            Base62 encoding of `id`. Unique and immutable.
        created_at (datetime):
            Moment the record was created. Never changes.
        hits (int):
            Number of recorded accesses. Starts at 0 and only ever increases.

    Example:
        >>> from datetime import datetime, UTC
        >>> url = ShortURLModel(
        ...     id=62,
        ...     target='https://example.com/article/123',
        ...     shortcode='10',
        ...     created_at=datetime(2025, 10, 15, tzinfo=UTC),
        ... )
        >>> url.shortcode
        '10'
        >>> url.hits
        0
    """

    id: int
    target: str
    shortcode: str
    created_at: datetime
    hits: int = 0
