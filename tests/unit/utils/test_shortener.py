"""Unit tests for the slug generation utilities in shortener.py.

Test coverage includes:

1. random_int()
   - Stays within inclusive bounds, rejects bad bounds.

2. encode_slug()
   - Known inputs produce stable, URL-safe, padding-free output.
   - Only the trailing 8 characters are kept.

3. generate_slug()
   - First candidate is built as `<url>+<random>+<timestamp>`.
   - Collisions retry with `<timestamp><url><random>`.
   - Bounded retries raise SlugGenerationError; None retries until free.
"""

import string
from datetime import datetime, UTC
from unittest.mock import MagicMock

import pytest
from freezegun import freeze_time

from slugshortener.models import URLRecordModel
from slugshortener.dao.base import URLRecordBaseDAO
from slugshortener.dao.exceptions import URLRecordNotFoundError, DataStoreError
from slugshortener.exceptions import SlugGenerationError
from slugshortener.utils import shortener
from slugshortener.utils.shortener import encode_slug, generate_slug, random_int


URL_SAFE_ALPHABET = set(string.ascii_letters + string.digits + '-_')
FROZEN_AT = datetime(2026, 10, 19, 12, 0, 0, tzinfo=UTC)
FROZEN_TS = int(FROZEN_AT.timestamp())
LONG_URL = 'https://example.com/long/path'


# -------------------------------
# Fixtures
# -------------------------------


@pytest.fixture
def free_dao():
    """Durable store where every slug is free."""
    dao = MagicMock(spec=URLRecordBaseDAO)
    dao.get.side_effect = URLRecordNotFoundError('not found')
    return dao


@pytest.fixture
def full_dao():
    """Durable store where every slug is taken."""
    dao = MagicMock(spec=URLRecordBaseDAO)
    dao.get.return_value = URLRecordModel(identifier='taken', original_url='https://taken.example')
    return dao


@pytest.fixture
def fixed_random(monkeypatch):
    monkeypatch.setattr(shortener, 'random_int', lambda min_value, max_value: 42)


# -------------------------------
# 1. random_int()
# -------------------------------


def test_random_int_within_bounds():
    for _ in range(200):
        assert 1 <= random_int(1, 10) <= 10


def test_random_int_equal_bounds():
    assert random_int(7, 7) == 7


def test_random_int_rejects_inverted_bounds():
    with pytest.raises(ValueError, match='Lower bound must not exceed upper bound'):
        random_int(10, 1)


@pytest.mark.parametrize('bounds', [(1.5, 10), (1, '10'), (None, 10)])
def test_random_int_rejects_non_integers(bounds):
    with pytest.raises(TypeError, match='Bounds must be integers'):
        random_int(*bounds)


# -------------------------------
# 2. encode_slug()
# -------------------------------


@pytest.mark.parametrize(
    'candidate, expected',
    [
        ('abcdef', 'YWJjZGVm'),
        ('xyzabcdef', 'YWJjZGVm'),
        ('abcdefg', 'JjZGVmZw'),
        ('~~~~~~', 'fn5-fn5-'),
    ],
)
def test_encode_slug_known_values(candidate, expected):
    assert encode_slug(candidate) == expected


def test_encode_slug_short_input_is_not_padded():
    assert encode_slug('a') == 'YQ'


def test_encode_slug_output_format():
    slug = encode_slug(f'{LONG_URL}+123456+{FROZEN_TS}')
    assert len(slug) == 8
    assert set(slug) <= URL_SAFE_ALPHABET


# -------------------------------
# 3. generate_slug()
# -------------------------------


@freeze_time(FROZEN_AT)
def test_generate_slug_first_candidate(free_dao, fixed_random):
    slug = generate_slug(LONG_URL, 1, 1_000_000, free_dao)

    assert slug == encode_slug(f'{LONG_URL}+42+{FROZEN_TS}')
    free_dao.get.assert_called_once_with(slug)


@freeze_time(FROZEN_AT)
def test_generate_slug_retries_with_reordered_candidate(free_dao, fixed_random):
    first = encode_slug(f'{LONG_URL}+42+{FROZEN_TS}')
    retry = encode_slug(f'{FROZEN_TS}{LONG_URL}42')
    assert first != retry

    def get(identifier):
        if identifier == first:
            return URLRecordModel(identifier=first, original_url='https://taken.example')
        raise URLRecordNotFoundError('not found')

    free_dao.get.side_effect = get

    assert generate_slug(LONG_URL, 1, 1_000_000, free_dao) == retry
    assert free_dao.get.call_count == 2


def test_generate_slug_passes_bounds_to_random(monkeypatch, free_dao):
    draws = []
    monkeypatch.setattr(shortener, 'random_int', lambda lo, hi: draws.append((lo, hi)) or lo)

    generate_slug(LONG_URL, 5, 9, free_dao)

    assert draws == [(5, 9)]


def test_generate_slug_gives_up_after_max_attempts(full_dao):
    with pytest.raises(SlugGenerationError, match='after 3 attempts') as exc_info:
        generate_slug(LONG_URL, 1, 1_000_000, full_dao, max_attempts=3)

    assert exc_info.value.error_code == 'app:slug_generation_error'
    assert full_dao.get.call_count == 3


def test_generate_slug_unbounded(full_dao):
    full_dao.get.side_effect = [URLRecordModel(identifier='taken', original_url='https://taken.example')] * 40 + [
        URLRecordNotFoundError('not found')
    ]

    slug = generate_slug(LONG_URL, 1, 1_000_000, full_dao, max_attempts=None)

    assert len(slug) == 8
    assert full_dao.get.call_count == 41


@pytest.mark.parametrize('max_attempts', [0, -1])
def test_generate_slug_rejects_non_positive_attempts(free_dao, max_attempts):
    with pytest.raises(ValueError, match='max_attempts must be a positive integer'):
        generate_slug(LONG_URL, 1, 1_000_000, free_dao, max_attempts=max_attempts)


def test_generate_slug_propagates_store_failure(free_dao):
    free_dao.get.side_effect = DataStoreError("Can't connect to Redis at redis.test:6379/0.")

    with pytest.raises(DataStoreError):
        generate_slug(LONG_URL, 1, 1_000_000, free_dao)
