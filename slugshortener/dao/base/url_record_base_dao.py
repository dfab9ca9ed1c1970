"""Abstract base class for durable URL record data access objects (DAOs).

This class establishes the contract the mapping service and the slug generator
rely on, regardless of the underlying storage mechanism (e.g., Redis, MongoDB).

Responsibilities:
    - Insert a URL record exactly once (first write wins).
    - Find a single URL record by its identifier.
    - Standardize the "no document" condition as URLRecordNotFoundError.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from slugshortener.models import URLRecordModel
        >>> from slugshortener.dao.redis import URLRecordRedisDAO

        >>> dao = URLRecordRedisDAO(...)
        >>> dao.insert(URLRecordModel(identifier="abcDEF12", original_url="https://example.com"))

        >>> dao.get("abcDEF12").original_url
        'https://example.com'
"""

from abc import ABC, abstractmethod

from slugshortener.models import URLRecordModel


class URLRecordBaseDAO(ABC):
    """Interface for durable URL record DAOs.

    Methods:
        insert(record: URLRecordModel, **kwargs) -> URLRecordBaseDAO:
            Insert a new record into the data store.
            Raises URLRecordAlreadyExistsError if the identifier is taken.
            Raises DataStoreError on connection, timeout or write failure.

        get(identifier: str, **kwargs) -> URLRecordModel:
            Retrieve a record by identifier.
            Raises URLRecordNotFoundError if no record matches.
            Raises DataStoreError on connection, timeout or read failure.

    NOTE:
        - Records are immutable: the DAO offers no update or delete.
        - Implementations must enforce identifier uniqueness at the store level,
          since concurrent creators may both pass an earlier existence check.
    """

    @abstractmethod
    def insert(self, record: URLRecordModel, **kwargs) -> 'URLRecordBaseDAO':
        """Insert a new URL record into the data store.

        Args:
            record (URLRecordModel):
                The record to persist.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            URLRecordBaseDAO: self (for method chaining)

        Raises:
            URLRecordAlreadyExistsError:
                If a record with the same identifier already exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def get(self, identifier: str, **kwargs) -> URLRecordModel:
        """Retrieve a URL record from the data store by its identifier.

        Args:
            identifier (str):
                The slug of the record to be retrieved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            URLRecordModel: The stored record, including its creation timestamp.

        Raises:
            URLRecordNotFoundError:
                If no record with the given identifier exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass
