"""Helper utilities for AWS lambda functions.

Functions:
    base_url() -> str
        Extract correct public base URL from API Gateway event
    get_short_url() -> str
        Get string representation of short URL for a given identifier
    client_ip() -> str
        Extract the caller's source IP (cache owner key) from API Gateway event
    require_environment(*names: str) -> Callable
        Decorator: Ensure required environment variables are present

Example:
    >>> from slugshortener.utils.helpers import base_url
    >>> event = {
    ...     "requestContext": {
    ...         "domainName": "abc123.execute-api.us-east-1.amazonaws.com",
    ...         "stage": "Prod"
    ...     }
    ... }
    >>> base_url(event)
    'https://abc123.execute-api.us-east-1.amazonaws.com/Prod'

    >>> base_url({})
    'http://localhost:3000'
"""

import os
import functools
from typing import Any
from collections.abc import Callable

from slugshortener.exceptions import MissingEnvironmentVariableError


UNKNOWN_CLIENT = 'unknown'


def base_url(event: dict[str, Any]) -> str:
    """Extract public base URL from API Gateway event

    If a custom domain is configured, the stage name is omitted.
    If using the default AWS execute-api domain, the stage name is included.

    Args:
        event (dict): API Gateway event object passed to Lambda handler

    Returns:
        str: Base URL, e.g.:
             - "https://sho.rt"
             - "https://abc123.execute-api.us-east-1.amazonaws.com/Prod"
    """
    request_context = event.get('requestContext', {})
    domain = request_context.get('domainName', '')
    stage = request_context.get('stage', '')

    if domain and 'execute-api' not in domain:
        return f'https://{domain}'
    elif domain:
        return f'https://{domain}/{stage}'
    else:
        # local invocation (SAM CLI, tests, etc.)
        return 'http://localhost:3000'


def get_short_url(identifier: str, event: dict[str, Any]) -> str:
    """Get string representation of shortened URL

    Args:
        identifier (str): slug of the URL record
        event (dict): API Gateway event object passed to Lambda handler

    Returns:
        str: short url string representation
    """
    return f'{base_url(event).rstrip("/")}/{identifier}'


def client_ip(event: dict[str, Any]) -> str:
    """Return the caller's source IP from an API Gateway event.

    The value partitions the URL cache; it isn't validated. REST (v1) events
    carry it under requestContext.identity, HTTP (v2) events under requestContext.http.

    Args:
        event (dict): API Gateway event object passed to Lambda handler

    Returns:
        str: source IP, or 'unknown' when the event doesn't carry one.
    """
    request_context = event.get('requestContext') or {}
    identity = request_context.get('identity') or {}
    http = request_context.get('http') or {}
    return identity.get('sourceIp') or http.get('sourceIp') or UNKNOWN_CLIENT


def require_environment(*names: str) -> Callable:
    """Decorator ensuring required environment variables are present.

    Args:
        *names (str):
            Names of required environment variables.

    Raises:
        MissingEnvironmentVariableError:
            If any required environment variable is missing or empty.

    Example:
        >>> @require_environment('APPCONFIG_APP_ID', 'APPCONFIG_ENV_ID')
        ... def my_function():
        ...     pass
        >>> my_function()
        MissingEnvironmentVariableError: Missing required environment variables: 'APPCONFIG_APP_ID', 'APPCONFIG_ENV_ID'
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            missing = [name for name in names if not os.environ.get(name)]
            if missing:
                missing_list = ', '.join(f"'{name}'" for name in missing)
                raise MissingEnvironmentVariableError(f'Missing required environment variables: {missing_list}')
            return func(*args, **kwargs)

        return wrapper

    return decorator
