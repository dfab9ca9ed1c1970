"""Abstract base class for the URL cache tier.

The cache holds the reduced `{originalUrl, identifier}` copy of durable records,
partitioned by an owner key (e.g. the client's network address).
"""

from abc import ABC, abstractmethod

from slugshortener.models import CachedURLModel, URLRecordModel


class URLCacheBaseDAO(ABC):
    """Interface for URL cache DAOs.

    Methods:
        put(record: URLRecordModel, owner_id: str, **kwargs) -> URLCacheBaseDAO:
            Cache the record under both its identifier and its original URL,
            scoped to the owner, with no expiry.
            Raises CachePutError or DataStoreError on failure.

        get(key: str, owner_id: str, **kwargs) -> CachedURLModel:
            Look up a cached record by identifier or original URL.
            Raises CacheMissError when absent and CacheDecodeError when corrupt.
    """

    @abstractmethod
    def put(self, record: URLRecordModel, owner_id: str, **kwargs) -> 'URLCacheBaseDAO':
        """Write a record through to the cache.

        Args:
            record (URLRecordModel):
                Durable record to mirror. Only `original_url` and `identifier` are cached.

            owner_id (str):
                Partition key appended to every cache key.

        Returns:
            URLCacheBaseDAO: self (for method chaining)

        Raises:
            CachePutError:
                If the cache rejects the write.

            DataStoreError:
                If the cache can't be reached.
        """
        pass

    @abstractmethod
    def get(self, key: str, owner_id: str, **kwargs) -> CachedURLModel:
        """Read a cached record.

        Args:
            key (str):
                Either the identifier or the original URL of the record.

            owner_id (str):
                Partition key the record was cached under.

        Returns:
            CachedURLModel: The cached `{original_url, identifier}` pair.

        Raises:
            CacheMissError:
                If nothing is cached under the key for this owner.

            CacheDecodeError:
                If the cached payload can't be deserialized.

            DataStoreError:
                If the cache can't be reached.
        """
        pass
