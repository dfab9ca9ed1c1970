import functools
from collections.abc import Callable


__all__ = ['CacheKeySchema']  # hide internal decorator prefix_key from imports


def prefix_key(func: Callable) -> Callable:
    @functools.wraps(func)
    def wrapper(self, *args, **kwargs) -> str:
        key = func(self, *args, **kwargs)
        return f'{self.prefix}:{key}' if self.prefix is not None else key

    return wrapper


class CacheKeySchema:
    """Provide owner-scoped Redis keys for the URL cache tier.

    Every entry is addressed as `<key>-<owner_id>`, where key is either the
    identifier or the original URL of a record. An optional prefix namespaces
    the keys as `cache:<prefix>:<key>-<owner_id>`.

    NOTE: Yes, this class mirrors RedisKeySchema, but we don't want the cache
    tier and the durable store to share a key space.
    """

    def __init__(self, prefix: str | None = None):
        if prefix is not None and not isinstance(prefix, str):
            raise TypeError(f'Prefix must be of type string (given type: {type(prefix)}).')

        self.prefix = f'cache:{prefix}' if prefix is not None else None

    @prefix_key
    def url_key(self, key: str, owner_id: str) -> str:
        return f'{key}-{owner_id}'
