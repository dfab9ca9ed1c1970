"""Slug generation utility

This module mints short, URL-safe identifiers for long URLs and checks them
against the durable store until an unused one is found.

Functions:
    random_int(min_value, max_value) -> int:
        Draw a uniform pseudo-random integer, both bounds inclusive.

    encode_slug(candidate) -> str:
        Encode a candidate string into an 8 character URL-safe slug.

    generate_slug(long_url, min_rand, max_rand, dao, max_attempts=DEFAULT_SLUG_MAX_ATTEMPTS) -> str:
        Mint a slug with no current match in the durable store.

Example:
    >>> from slugshortener.utils import generate_slug
    >>> generate_slug('https://example.com/long/path', 1, 1_000_000, dao)
    'MTc2MDg5'
"""

import base64
import logging
import random
import time
from typing import Optional

from slugshortener.dao.base import URLRecordBaseDAO
from slugshortener.dao.exceptions import URLRecordNotFoundError
from slugshortener.exceptions import SlugGenerationError
from slugshortener.utils.constants import SLUG_LENGTH, DEFAULT_SLUG_MAX_ATTEMPTS


logger = logging.getLogger(__name__)


def random_int(min_value: int, max_value: int) -> int:
    """Return a uniform pseudo-random integer in [min_value, max_value].

    Not suitable for cryptographic use.

    Raises:
        TypeError: If either bound isn't an integer.
        ValueError: If min_value is greater than max_value.
    """
    if not isinstance(min_value, int) or not isinstance(max_value, int):
        raise TypeError(f'Bounds must be integers (given types: {type(min_value)}, {type(max_value)}).')
    if min_value > max_value:
        raise ValueError(f'Lower bound must not exceed upper bound (given values: {min_value}, {max_value}).')

    return random.randint(min_value, max_value)


def encode_slug(candidate: str) -> str:
    """Encode a candidate with padding-free URL-safe base64 and keep the last SLUG_LENGTH characters."""
    encoded = base64.urlsafe_b64encode(candidate.encode('utf-8')).decode('ascii').rstrip('=')
    return encoded[-SLUG_LENGTH:]


def _is_taken(identifier: str, dao: URLRecordBaseDAO) -> bool:
    try:
        dao.get(identifier)
    except URLRecordNotFoundError:
        return False
    return True


def generate_slug(
    long_url: str,
    min_rand: int,
    max_rand: int,
    dao: URLRecordBaseDAO,
    max_attempts: Optional[int] = DEFAULT_SLUG_MAX_ATTEMPTS,
) -> str:
    """Mint a URL-safe slug that no durable record currently uses.

    The first candidate concatenates the URL, a random draw and the current Unix
    time (seconds) as `<url>+<random>+<timestamp>`. Every retry reorders the parts
    as `<timestamp><url><random>` with a fresh draw and timestamp. Each candidate
    is encoded with encode_slug() and looked up in the durable store.

    Args:
        long_url (str):
            The URL being shortened.

        min_rand (int):
            Lower bound of the random component (inclusive).

        max_rand (int):
            Upper bound of the random component (inclusive).

        dao (URLRecordBaseDAO):
            Durable store used for the collision check.

        max_attempts (Optional[int]):
            Maximum number of candidates to check before giving up.
            None retries until a free slug is found.

    Returns:
        str: An 8 character slug with no match at the moment of the last check.

    Raises:
        SlugGenerationError:
            If max_attempts candidates all collide.

        DataStoreError:
            If the durable store can't be reached during a check.

    NOTE:
        The guarantee only holds at the time of the last lookup. A concurrent
        creator may still claim the same slug before it's inserted, so the
        store's own uniqueness constraint remains the final arbiter.
    """
    if max_attempts is not None and max_attempts < 1:
        raise ValueError(f'max_attempts must be a positive integer or None (given value: {max_attempts}).')

    slug = encode_slug(f'{long_url}+{random_int(min_rand, max_rand)}+{int(time.time())}')
    attempts = 1

    while _is_taken(slug, dao):
        if max_attempts is not None and attempts >= max_attempts:
            raise SlugGenerationError(f'Could not mint a free slug for {long_url} after {attempts} attempts.')

        logger.debug('Slug collision, regenerating.', extra={'slug': slug, 'attempt': attempts})
        slug = encode_slug(f'{int(time.time())}{long_url}{random_int(min_rand, max_rand)}')
        attempts += 1

    return slug
