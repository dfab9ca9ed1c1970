"""URL mapping service: creation and lookup of URL records across cache and durable store.

Write path (create):
    generate slug (if none given) -> lookup -> durable insert -> cache write-through

Read path (lookup):
    cache -> (optional) durable store fallback -> cache repopulation

The service receives its durable store and cache tier at construction time,
so any implementation of URLRecordBaseDAO / URLCacheBaseDAO can be plugged in.

Example:
    >>> records = URLRecordRedisDAO(prefix='slugshortener:dev')
    >>> cache = URLCacheRedisDAO(prefix='slugshortener:dev')
    >>> service = URLMappingService(records, cache)
    >>> record = service.create('https://example.com/long/path', '', '203.0.113.5')
    >>> service.lookup(record.identifier, '203.0.113.5').original_url
    'https://example.com/long/path'
"""

import logging
from datetime import datetime, UTC
from typing import Optional

from beartype import beartype

from slugshortener.models import URLRecordModel
from slugshortener.dao.base import URLCacheBaseDAO, URLRecordBaseDAO
from slugshortener.dao.exceptions import CacheMissError, URLRecordAlreadyExistsError, URLRecordNotFoundError
from slugshortener.utils.shortener import generate_slug
from slugshortener.utils.constants import DEFAULT_SLUG_RANDOM_MIN, DEFAULT_SLUG_RANDOM_MAX, DEFAULT_SLUG_MAX_ATTEMPTS


logger = logging.getLogger(__name__)


class URLMappingService:
    """Coordinate URL records between the durable store and the cache tier.

    Attributes:
        records (URLRecordBaseDAO):
            Durable store of URL records.
        cache (URLCacheBaseDAO):
            Owner-scoped cache tier.
        min_rand (int), max_rand (int):
            Bounds of the random component used when minting slugs.
        max_attempts (Optional[int]):
            Bound on slug collision retries (None means unbounded).
        fallback_on_cache_miss (bool):
            If False (default), a cache miss in lookup() is reported as "no record"
            without consulting the durable store. If True, lookup() falls back to
            the durable store and repopulates the cache.
    """

    def __init__(
        self,
        records: URLRecordBaseDAO,
        cache: URLCacheBaseDAO,
        *,
        min_rand: int = DEFAULT_SLUG_RANDOM_MIN,
        max_rand: int = DEFAULT_SLUG_RANDOM_MAX,
        max_attempts: Optional[int] = DEFAULT_SLUG_MAX_ATTEMPTS,
        fallback_on_cache_miss: bool = False,
    ):
        self.records = records
        self.cache = cache
        self.min_rand = min_rand
        self.max_rand = max_rand
        self.max_attempts = max_attempts
        self.fallback_on_cache_miss = fallback_on_cache_miss

    @beartype
    def create(self, original_url: str, identifier: str, owner_id: str) -> URLRecordModel:
        """Create a URL record, or return the existing one for the identifier.

        Args:
            original_url (str):
                The long URL to shorten.
            identifier (str):
                Slug to create the record under. An empty string mints a fresh one.
            owner_id (str):
                Cache partition key (e.g. the client address).

        Returns:
            URLRecordModel: The new record, or the existing one if the identifier is taken.

        Raises:
            DataStoreError:
                If the durable store or the cache can't be reached. When the cache
                write fails after the durable insert, the record stays durable.
            CachePutError:
                If the cache write-through fails.
            SlugGenerationError:
                If no free slug could be minted.
        """
        if not identifier:
            identifier = generate_slug(original_url, self.min_rand, self.max_rand, self.records, max_attempts=self.max_attempts)

        existing = self.lookup(identifier, owner_id)
        if existing is not None:
            logger.debug('URL record already exists, returning it.', extra={'identifier': identifier, 'ownerId': owner_id})
            return existing

        record = URLRecordModel(identifier=identifier, original_url=original_url, created_at=datetime.now(UTC))
        try:
            self.records.insert(record)
        except URLRecordAlreadyExistsError:
            # First write wins: the identifier was claimed after our lookup
            # (concurrent create) or the cache was cold. Serve the durable copy.
            record = self.records.get(identifier)
            logger.info('URL record created concurrently, returning the stored one.', extra={'identifier': identifier})
        else:
            logger.info('Created URL record.', extra={'identifier': identifier, 'originalUrl': original_url})

        self.cache.put(record, owner_id)
        return record

    @beartype
    def lookup(self, identifier: str, owner_id: str) -> Optional[URLRecordModel]:
        """Find the URL record for an identifier, cache first.

        A cached hit is returned with created_at=None since the cache copy never
        carries the timestamp. With the default settings a cache miss returns None
        without querying the durable store, so a record that was evicted from the
        cache (or never cached for this owner) looks absent.

        Args:
            identifier (str):
                The slug to resolve.
            owner_id (str):
                Cache partition key.

        Returns:
            Optional[URLRecordModel]: The record, or None if there is none.

        Raises:
            DataStoreError:
                If the cache (or the durable store, on fallback) can't be reached.
            CacheDecodeError:
                If the cached payload is corrupt.
        """
        try:
            cached = self.cache.get(identifier, owner_id)
        except CacheMissError:
            if not self.fallback_on_cache_miss:
                return None
        else:
            return cached.to_record()

        try:
            record = self.records.get(identifier)
        except URLRecordNotFoundError:
            return None

        logger.debug('Cache miss served from durable store.', extra={'identifier': identifier, 'ownerId': owner_id})
        self.cache.put(record, owner_id)
        return record
