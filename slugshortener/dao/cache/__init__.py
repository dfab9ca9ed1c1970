from slugshortener.dao.cache.cache_key_schema import CacheKeySchema
from slugshortener.dao.cache.url_cache_redis_dao import URLCacheRedisDAO

__all__ = [
    'CacheKeySchema',
    'URLCacheRedisDAO',
]
