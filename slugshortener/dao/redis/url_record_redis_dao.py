"""Data Access Object (DAO) implementation for durable URL records in Redis

This module provides a Redis-based implementation of URLRecordBaseDAO.

Responsibilities:
    - Insert URL records exactly once (identifier uniqueness enforced by SET NX);
    - Find a single URL record by identifier;
    - Raise appropriate DAO exceptions on missing records and connectivity issues.

Each record lives under a single string key holding a JSON document:

    <prefix>:links:<identifier> => {"identifier": ..., "originalUrl": ..., "createdAt": ...}

Records never expire.

Classes:
    URLRecordRedisDAO:
        DAO for storing and retrieving URLRecordModel in a Redis datastore.

Example:
    >>> from slugshortener.models import URLRecordModel
    >>> from slugshortener.dao.redis import URLRecordRedisDAO

    >>> dao = URLRecordRedisDAO(prefix="slugshortener:dev")
    >>> dao.insert(URLRecordModel(identifier="abcDEF12", original_url="https://example.com/page"))
    <URLRecordRedisDAO>

    >>> dao.get("abcDEF12").original_url
    'https://example.com/page'
"""

import json
from datetime import datetime

from beartype import beartype

from slugshortener.models import URLRecordModel
from slugshortener.dao.base import URLRecordBaseDAO
from slugshortener.dao.redis.mixins import RedisClientMixin
from slugshortener.dao.redis.helpers import handle_redis_connection_error
from slugshortener.dao.exceptions import DataStoreError, URLRecordAlreadyExistsError, URLRecordNotFoundError


class URLRecordRedisDAO(RedisClientMixin, URLRecordBaseDAO):
    """Redis-based Data Access Object (DAO) for durable URL records

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        insert(record: URLRecordModel, **kwargs) -> URLRecordRedisDAO:
            Insert a URL record.
            Raises URLRecordAlreadyExistsError when the identifier is taken.
            Raises DataStoreError on connectivity issues with Redis.

        get(identifier: str, **kwargs) -> URLRecordModel:
            Retrieve a URL record by identifier.
            Raises URLRecordNotFoundError when the identifier doesn't exist.
            Raises DataStoreError on connectivity issues or a corrupt record.
    """

    @handle_redis_connection_error
    @beartype
    def insert(self, record: URLRecordModel, **kwargs) -> 'URLRecordRedisDAO':
        """Insert a URL record into Redis

        The write is a single SET NX, so the existence check and the insertion
        are atomic. Two concurrent creators of the same identifier can't both win.

        Args:
            record (URLRecordModel):
                Record to persist. A missing created_at is stored as null.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            URLRecordRedisDAO: self (for method chaining)

        Raises:
            URLRecordAlreadyExistsError:
                If a record with the same identifier already exists.
            DataStoreError:
                If a Redis connection issue occurs.

        Example:
            >>> dao.insert(URLRecordModel(identifier='abcDEF12', original_url='https://example.com'))
            <URLRecordRedisDAO>
        """
        document = {
            'identifier': record.identifier,
            'originalUrl': record.original_url,
            'createdAt': record.created_at.isoformat() if record.created_at is not None else None,
        }
        created = self.redis.set(self.keys.record_key(record.identifier), json.dumps(document), nx=True)
        if not created:
            raise URLRecordAlreadyExistsError(f"URL record with identifier '{record.identifier}' already exists.")
        return self

    @handle_redis_connection_error
    @beartype
    def get(self, identifier: str, **kwargs) -> URLRecordModel:
        """Retrieve a stored URL record by identifier

        Args:
            identifier (str):
                The slug of the record.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            URLRecordModel:
                The retrieved record, created_at included.

        Raises:
            URLRecordNotFoundError:
                If no record with the identifier exists in Redis.
            DataStoreError:
                If Redis connectivity issues occur or the stored document is corrupt.

        Example:
            >>> dao.get('abcDEF12')
            URLRecordModel(identifier='abcDEF12', original_url='https://example.com', created_at=...)
        """
        raw = self.redis.get(self.keys.record_key(identifier))
        if raw is None:
            raise URLRecordNotFoundError(f"URL record with identifier '{identifier}' not found.")

        try:
            document = json.loads(raw)
            created_at = document.get('createdAt')
            return URLRecordModel(
                identifier=document['identifier'],
                original_url=document['originalUrl'],
                created_at=datetime.fromisoformat(created_at) if created_at else None,
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise DataStoreError(f"URL record with identifier '{identifier}' is corrupt.") from e
