from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class URLRecordModel:
    """Represent a long URL to slug mapping.

    Attributes:
        identifier (str):
            The unique 8 character slug standing in for the original URL.
        original_url (str):
            The long URL the slug resolves to.
        created_at (Optional[datetime]):
            Creation time in UTC. Only durable copies carry it; records
            rebuilt from the cache leave it as None.

    Example:
        >>> from datetime import datetime, UTC
        >>> record = URLRecordModel(
        ...     identifier="abcDEF12",
        ...     original_url="https://example.com/long/path",
        ...     created_at=datetime.now(UTC),
        ... )
        >>> record.identifier
        'abcDEF12'
    """
    identifier: str
    original_url: str
    created_at: Optional[datetime] = None

    def cached(self) -> 'CachedURLModel':
        """Reduce the record to the subset stored in the cache."""
        return CachedURLModel(original_url=self.original_url, identifier=self.identifier)


@dataclass(frozen=True)
class CachedURLModel:
    """Cache copy of a URL record: only the original URL and the slug.

    Serialized as a flat JSON object with the fields `originalUrl` and `identifier`.
    """
    original_url: str
    identifier: str

    def to_record(self) -> URLRecordModel:
        return URLRecordModel(identifier=self.identifier, original_url=self.original_url)
