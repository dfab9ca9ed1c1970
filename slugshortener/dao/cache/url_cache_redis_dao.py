"""Redis-backed cache tier for URL records

The cache mirrors the `{originalUrl, identifier}` subset of durable records.
Each record is written twice, once per lookup direction, both scoped to the
owner (e.g. the client address) that created or requested it:

    <identifier>-<owner_id>    => {"originalUrl": "...", "identifier": "..."}
    <original url>-<owner_id>  => {"originalUrl": "...", "identifier": "..."}

Entries never expire.

Classes:
    URLCacheRedisDAO:
        Cache DAO implementing URLCacheBaseDAO on top of Redis.

Example:
    >>> dao = URLCacheRedisDAO(redis_host='localhost')
    >>> dao.put(record, owner_id='203.0.113.5')
    <URLCacheRedisDAO>
    >>> dao.get('abcDEF12', owner_id='203.0.113.5')
    CachedURLModel(original_url='https://example.com/long/path', identifier='abcDEF12')
"""

import json
import logging
from typing import Optional

import redis
from beartype import beartype

from slugshortener.models import CachedURLModel, URLRecordModel
from slugshortener.dao.base import URLCacheBaseDAO
from slugshortener.dao.cache.cache_key_schema import CacheKeySchema
from slugshortener.dao.redis.mixins import RedisClientMixin
from slugshortener.dao.redis.helpers import handle_redis_connection_error
from slugshortener.dao.exceptions import CacheDecodeError, CacheMissError, CachePutError


logger = logging.getLogger(__name__)


class URLCacheRedisDAO(RedisClientMixin, URLCacheBaseDAO):
    """Redis implementation of the URL cache tier.

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the cache.
        keys (CacheKeySchema):
            Key schema helper for owner-scoped cache keys.

    Methods:
        put(record: URLRecordModel, owner_id: str, **kwargs) -> URLCacheRedisDAO:
            Cache the record under its identifier and its original URL.
            Raises CachePutError if Redis rejects the write.
            Raises DataStoreError on connectivity issues with Redis.

        get(key: str, owner_id: str, **kwargs) -> CachedURLModel:
            Read a cached record by identifier or original URL.
            Raises CacheMissError when absent.
            Raises CacheDecodeError when the payload is corrupt.
            Raises DataStoreError on connectivity issues with Redis.
    """

    def __init__(self, *args, prefix: Optional[str] = None, **kwargs):
        super().__init__(*args, prefix=prefix, **kwargs)
        self.keys = CacheKeySchema(prefix=prefix)

    @handle_redis_connection_error
    @beartype
    def put(self, record: URLRecordModel, owner_id: str, **kwargs) -> 'URLCacheRedisDAO':
        """Write a URL record through to the cache

        Both keys are written in one MULTI/EXEC transaction, so a reader never
        sees the record under one key but not the other.

        Args:
            record (URLRecordModel):
                Record to cache. created_at is dropped.
            owner_id (str):
                Partition key appended to both cache keys.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            URLCacheRedisDAO: self (for method chaining)

        Raises:
            CachePutError:
                If Redis rejects the transaction.
            DataStoreError:
                If a Redis connection issue occurs.
        """
        payload = json.dumps({'originalUrl': record.original_url, 'identifier': record.identifier})
        identifier_key = self.keys.url_key(record.identifier, owner_id)
        original_url_key = self.keys.url_key(record.original_url, owner_id)

        try:
            with self.redis.pipeline(transaction=True) as pipe:
                pipe.set(identifier_key, payload)
                pipe.set(original_url_key, payload)
                pipe.execute()
        except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError):
            raise
        except redis.exceptions.RedisError as e:
            raise CachePutError(f"Failed to cache URL record '{record.identifier}' for owner '{owner_id}'.") from e

        logger.debug('Cached URL record.', extra={'identifier': record.identifier, 'ownerId': owner_id})
        return self

    @handle_redis_connection_error
    @beartype
    def get(self, key: str, owner_id: str, **kwargs) -> CachedURLModel:
        """Read a cached URL record

        Args:
            key (str):
                Identifier or original URL of the record.
            owner_id (str):
                Partition key the record was cached under.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            CachedURLModel: The cached `{original_url, identifier}` pair.

        Raises:
            CacheMissError:
                If the key is absent for this owner.
            CacheDecodeError:
                If the cached payload isn't a `{originalUrl, identifier}` JSON object.
            DataStoreError:
                If a Redis connection issue occurs.
        """
        cache_key = self.keys.url_key(key, owner_id)
        raw = self.redis.get(cache_key)
        if raw is None:
            raise CacheMissError(f"Cache key '{cache_key}' not found.")

        try:
            payload = json.loads(raw)
            original_url = payload['originalUrl']
            identifier = payload['identifier']
        except (ValueError, TypeError, KeyError) as e:
            raise CacheDecodeError(f"Cache key '{cache_key}' holds a malformed URL record.") from e

        if not isinstance(original_url, str) or not isinstance(identifier, str):
            raise CacheDecodeError(f"Cache key '{cache_key}' holds a malformed URL record.")

        return CachedURLModel(original_url=original_url, identifier=identifier)
