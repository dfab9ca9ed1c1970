from slugshortener.dao.redis.redis_key_schema import RedisKeySchema
from slugshortener.dao.redis.mixins import RedisClientMixin
from slugshortener.dao.redis.url_record_redis_dao import URLRecordRedisDAO


__all__ = [
    'RedisKeySchema',
    'RedisClientMixin',
    'URLRecordRedisDAO',
]
