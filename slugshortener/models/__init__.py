from slugshortener.models.url_record_model import URLRecordModel, CachedURLModel


__all__ = [
    'URLRecordModel',
    'CachedURLModel',
]
