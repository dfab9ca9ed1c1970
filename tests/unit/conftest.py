"""Shared fixtures: in-memory implementations of the durable store and cache tier.

The fakes implement URLRecordBaseDAO / URLCacheBaseDAO with plain dictionaries
so service and lambda tests can exercise real behavior without Redis. They
record every durable lookup so tests can assert whether the store was queried.
"""

import json

import pytest

from slugshortener.models import CachedURLModel, URLRecordModel
from slugshortener.dao.base import URLCacheBaseDAO, URLRecordBaseDAO
from slugshortener.dao.exceptions import (
    CacheDecodeError,
    CacheMissError,
    URLRecordAlreadyExistsError,
    URLRecordNotFoundError,
)


class InMemoryURLRecordDAO(URLRecordBaseDAO):
    def __init__(self):
        self.rows: dict[str, URLRecordModel] = {}
        self.get_calls: list[str] = []

    def insert(self, record: URLRecordModel, **kwargs) -> 'InMemoryURLRecordDAO':
        if record.identifier in self.rows:
            raise URLRecordAlreadyExistsError(f"URL record with identifier '{record.identifier}' already exists.")
        self.rows[record.identifier] = record
        return self

    def get(self, identifier: str, **kwargs) -> URLRecordModel:
        self.get_calls.append(identifier)
        try:
            return self.rows[identifier]
        except KeyError:
            raise URLRecordNotFoundError(f"URL record with identifier '{identifier}' not found.") from None


class InMemoryURLCacheDAO(URLCacheBaseDAO):
    def __init__(self):
        self.entries: dict[str, str] = {}

    def put(self, record: URLRecordModel, owner_id: str, **kwargs) -> 'InMemoryURLCacheDAO':
        payload = json.dumps({'originalUrl': record.original_url, 'identifier': record.identifier})
        self.entries[f'{record.identifier}-{owner_id}'] = payload
        self.entries[f'{record.original_url}-{owner_id}'] = payload
        return self

    def get(self, key: str, owner_id: str, **kwargs) -> CachedURLModel:
        cache_key = f'{key}-{owner_id}'
        if cache_key not in self.entries:
            raise CacheMissError(f"Cache key '{cache_key}' not found.")
        try:
            payload = json.loads(self.entries[cache_key])
            return CachedURLModel(original_url=payload['originalUrl'], identifier=payload['identifier'])
        except (ValueError, KeyError) as e:
            raise CacheDecodeError(f"Cache key '{cache_key}' holds a malformed URL record.") from e


@pytest.fixture
def record_store() -> InMemoryURLRecordDAO:
    return InMemoryURLRecordDAO()


@pytest.fixture
def url_cache() -> InMemoryURLCacheDAO:
    return InMemoryURLCacheDAO()


@pytest.fixture
def owner_id() -> str:
    return '203.0.113.5'
