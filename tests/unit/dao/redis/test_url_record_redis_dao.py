"""Unit tests for the URLRecordRedisDAO

Test coverage includes:

1. Insertion behavior
   - Validates inserting a record stores its JSON document with SET NX and no expiry.
   - Ensures invalid types raise TypeError or BeartypeCallHintParamViolation.
   - Confirms taken identifiers raise URLRecordAlreadyExistsError.
   - Confirms Redis connection errors and timeouts raise DataStoreError.

2. Retrieval behavior
   - Ensures fetching a stored identifier returns a populated URLRecordModel.
   - Confirms missing keys raise URLRecordNotFoundError.
   - Confirms corrupt documents raise DataStoreError.
   - Confirms Redis connection errors and timeouts raise DataStoreError.
"""

import json
import re
from datetime import datetime, UTC

import pytest
import redis
from beartype.roar import BeartypeCallHintParamViolation

from slugshortener.models import URLRecordModel
from slugshortener.dao.exceptions import DataStoreError, URLRecordAlreadyExistsError, URLRecordNotFoundError
from slugshortener.dao.redis import URLRecordRedisDAO


# -------------------------------
# Fixtures
# -------------------------------


@pytest.fixture
def dao(redis_client, app_prefix):
    return URLRecordRedisDAO(redis_client=redis_client, prefix=app_prefix)


@pytest.fixture
def record():
    return URLRecordModel(
        identifier='abcDEF12',
        original_url='https://example.com/long/path',
        created_at=datetime(2026, 10, 19, 12, 0, 0, tzinfo=UTC),
    )


@pytest.fixture
def stored_document():
    return json.dumps(
        {
            'identifier': 'abcDEF12',
            'originalUrl': 'https://example.com/long/path',
            'createdAt': '2026-10-19T12:00:00+00:00',
        }
    )


# -------------------------------
# 1. Insertion behavior
# -------------------------------


def test_insert_url_record(dao, redis_client, record, stored_document):
    """Ensure a record is written once, atomically, without expiry."""
    assert dao.insert(record) is dao

    redis_client.set.assert_called_once_with('testapp:test:links:abcDEF12', stored_document, nx=True)


def test_insert_url_record_without_created_at(dao, redis_client):
    dao.insert(URLRecordModel(identifier='abcDEF12', original_url='https://example.com'))

    _, document, *_ = redis_client.set.call_args.args
    assert json.loads(document)['createdAt'] is None


def test_insert_url_record_with_invalid_type(dao):
    with pytest.raises((TypeError, BeartypeCallHintParamViolation)):
        dao.insert('https://example.com/not-a-model')


def test_insert_url_record_which_already_exists(dao, redis_client, record):
    """SET NX refusing the write means the identifier is taken."""
    redis_client.set.return_value = None

    with pytest.raises(URLRecordAlreadyExistsError, match=re.escape("URL record with identifier 'abcDEF12' already exists.")):
        dao.insert(record)


def test_insert_url_record_with_redis_connection_error(dao, redis_client, record):
    redis_client.set.side_effect = redis.exceptions.ConnectionError('Connection error')

    with pytest.raises(DataStoreError, match="Can't connect to Redis at redis.test:6379/0."):
        dao.insert(record)


def test_insert_url_record_with_redis_timeout(dao, redis_client, record):
    redis_client.set.side_effect = redis.exceptions.TimeoutError('Timeout reading from socket')

    with pytest.raises(DataStoreError, match='Timed out talking to Redis at redis.test:6379/0.'):
        dao.insert(record)


# -------------------------------
# 2. Retrieval behavior
# -------------------------------


def test_get_url_record(dao, redis_client, record, stored_document):
    redis_client.get.return_value = stored_document

    assert dao.get('abcDEF12') == record
    redis_client.get.assert_called_once_with('testapp:test:links:abcDEF12')


def test_get_url_record_with_invalid_type(dao):
    with pytest.raises((TypeError, BeartypeCallHintParamViolation)):
        dao.get(12345)


def test_get_url_record_which_does_not_exist(dao, redis_client):
    redis_client.get.return_value = None

    with pytest.raises(URLRecordNotFoundError, match="URL record with identifier 'abcDEF12' not found."):
        dao.get('abcDEF12')


@pytest.mark.parametrize(
    'document',
    [
        '{"identifier": "abcDEF12"',
        '{"identifier": "abcDEF12"}',
        '{"identifier": "abcDEF12", "originalUrl": "https://example.com", "createdAt": "yesterday"}',
        '["abcDEF12", "https://example.com"]',
    ],
)
def test_get_corrupt_url_record(dao, redis_client, document):
    redis_client.get.return_value = document

    with pytest.raises(DataStoreError, match="URL record with identifier 'abcDEF12' is corrupt."):
        dao.get('abcDEF12')


def test_get_url_record_with_redis_connection_error(dao, redis_client):
    redis_client.get.side_effect = redis.exceptions.ConnectionError('Connection Error')

    with pytest.raises(DataStoreError, match="Can't connect to Redis at redis.test:6379/0."):
        dao.get('abcDEF12')
