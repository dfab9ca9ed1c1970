"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    URLRecordNotFoundError:
        Raised when a URL record is not found in the durable store.

    URLRecordAlreadyExistsError:
        Raised when attempting to insert a URL record whose identifier is taken.

    DataStoreError:
        Raised when a data store can't be reached (connection issues, timeouts, etc.).

    CacheMissError:
        Raised when a requested cache entry is missing.

    CachePutError:
        Raised when writing a cache entry fails.

    CacheDecodeError:
        Raised when a cache entry can't be deserialized into a URL record.

Example:
    >>> from slugshortener.dao.exceptions import CacheMissError
    >>> raise CacheMissError("Cache key 'abcDEF12-203.0.113.5' not found.")
    Traceback (most recent call last):
        ...
    slugshortener.dao.exceptions.CacheMissError: Cache key 'abcDEF12-203.0.113.5' not found.
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""

    pass


class URLRecordNotFoundError(DAOError):
    """Exception raised when a URL record is not found in the durable store."""

    pass


class URLRecordAlreadyExistsError(DAOError):
    """Exception raised when a URL record with the same identifier already exists."""

    pass


class DataStoreError(DAOError):
    """Exception raised when there is an error in the data store.

    e.g. connection issues, timeouts, OOM, etc.
    """

    pass


class CacheMissError(DAOError):
    """Exception raised when a requested cache entry is missing."""

    pass


class CachePutError(DAOError):
    """Exception raised when writing a cache entry fails."""

    pass


class CacheDecodeError(DAOError):
    """Exception raised when a cache entry holds a corrupt or unexpected payload."""

    pass
