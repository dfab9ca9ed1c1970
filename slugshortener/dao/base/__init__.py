from slugshortener.dao.base.url_record_base_dao import URLRecordBaseDAO
from slugshortener.dao.base.url_cache_base_dao import URLCacheBaseDAO


__all__ = [
    'URLRecordBaseDAO',
    'URLCacheBaseDAO',
]
