"""Utility functions for application configuration management.

Lambda functions read their configuration from **AWS AppConfig**. Each
environment (`APP_ENV`) has a dedicated AppConfig *Environment* within the
AppConfig *Application*. The configuration JSON follows this structure:

    {
        "active_backend": "redis",
        "configs": {
            "shorten_url": {
                "redis": { "host": ..., "port": ..., "db": ... },
                "cache": { "host": ..., "port": ..., "db": ... },
                "service": { "max_attempts": 16, "fallback_on_cache_miss": false }
            },
            "redirect_url": {
                "redis": { ... }
            }
        }
    }

`redis` configures the durable store, `cache` the cache tier (defaults to the
durable store's settings) and `service` holds URLMappingService options (optional).

When running locally (`APP_ENV=local` or under SAM), AppConfig is skipped and
the Redis connection is read from `REDIS_HOST`, `REDIS_PORT` and `REDIS_DB`.

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`), defaulting to `'local'`.

    app_name() -> str | None
        Return the application name (`APP_NAME`), or None if not set.

    app_prefix() -> str | None
        Return application prefix for DAOs, or None if `APP_NAME` is not set.

    load_config(lambda_name: str) -> dict
        Load configuration for a given Lambda.

Example:
    >>> from slugshortener.utils.config import load_config
    >>> config = load_config('shorten_url')
    >>> config['redis']['host']
    'redis.internal'
"""

import os
import json
import functools
import logging
from collections.abc import Callable

import boto3

from slugshortener.exceptions import BadConfigurationError
from slugshortener.utils.helpers import require_environment
from slugshortener.utils.runtime import running_locally
from slugshortener.utils.constants import (
    APP_ENV_ENV,
    APP_NAME_ENV,
    APPCONFIG_APP_ID_ENV,
    APPCONFIG_ENV_ID_ENV,
    APPCONFIG_PROFILE_ID_ENV,
    REDIS_HOST_ENV,
    REDIS_PORT_ENV,
    REDIS_DB_ENV,
)


logger = logging.getLogger(__name__)


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(APP_ENV_ENV, 'local').lower()


def app_name() -> str | None:
    """Return the current application name by reading 'APP_NAME', None if unset"""
    return os.environ.get(APP_NAME_ENV)


def app_prefix() -> str | None:
    """Return application prefix for DAOs

    Returns:
        str: app prefix as <app name>:<app env>.
             None if APP_NAME is not set.

    Example:
        >>> os.environ['APP_NAME'] = 'slugshortener'
        >>> os.environ['APP_ENV'] = 'local'
        >>> app_prefix()
        'slugshortener:local'
    """
    return None if app_name() is None else f'{app_name()}:{app_env()}'


def _extract_lambda_config(document: dict, lambda_name: str) -> dict:
    """Pick the active backend's settings for one lambda out of an AppConfig document.

    Raises:
        BadConfigurationError: If the document lacks the expected keys.
    """
    try:
        backend = document['active_backend']
        lambda_config = document['configs'][lambda_name]
        backend_config = lambda_config[backend]
    except (KeyError, TypeError) as e:
        raise BadConfigurationError(f"AppConfig document has no '{lambda_name}' configuration for the active backend.") from e

    return {
        backend: backend_config,
        'cache': lambda_config.get('cache', backend_config),
        'service': lambda_config.get('service', {}),
    }


def _load_local_config(func: Callable[[str], dict]) -> Callable[[str], dict]:
    """Decorator: build the configuration from environment variables when running locally

    Behavior:
        - If the application is running locally, return a Redis configuration read
          from REDIS_HOST (default 'localhost'), REDIS_PORT (default 6379) and
          REDIS_DB (default 0), shared by the durable store and the cache.
        - Else, call the wrapped function (which pulls from AWS AppConfig via boto3).
    """

    @functools.wraps(func)
    def wrapper(lambda_name: str, *args, **kwargs) -> dict:
        if not running_locally():
            return func(lambda_name, *args, **kwargs)

        try:
            redis_config = {
                'host': os.getenv(REDIS_HOST_ENV, 'localhost'),
                'port': int(os.getenv(REDIS_PORT_ENV, '6379')),
                'db': int(os.getenv(REDIS_DB_ENV, '0')),
            }
        except ValueError as e:
            raise BadConfigurationError(f'{REDIS_PORT_ENV} and {REDIS_DB_ENV} must be integers.') from e

        logger.debug('Loaded local configuration from environment.', extra={'lambdaName': lambda_name})
        return {'redis': redis_config, 'cache': redis_config, 'service': {}}

    return wrapper


@_load_local_config
@require_environment(APPCONFIG_APP_ID_ENV, APPCONFIG_ENV_ID_ENV, APPCONFIG_PROFILE_ID_ENV)
def load_config(lambda_name: str) -> dict:
    """Load configuration for a given Lambda from AWS AppConfig

    Environment variables required:
        APPCONFIG_APP_ID       – AppConfig Application ID
        APPCONFIG_ENV_ID       – AppConfig Environment ID
        APPCONFIG_PROFILE_ID   – AppConfig Configuration Profile ID

    Args:
        lambda_name (str):
            Name of the Lambda (e.g., "shorten_url" or "redirect_url").

    Returns:
        dict: {"redis": {...}, "cache": {...}, "service": {...}}

    Raises:
        MissingEnvironmentVariableError:
            If an AppConfig identifier is missing from the environment.
        BadConfigurationError:
            If the document isn't valid JSON or lacks the lambda's section.
        botocore.exceptions.ClientError:
            If AppConfig rejects the request.
    """
    logger.debug('Trying to load AppConfig from AWS AppConfig.', extra={'lambdaName': lambda_name})

    appconfig = boto3.client('appconfigdata')

    session_token = appconfig.start_configuration_session(
        ApplicationIdentifier=os.environ[APPCONFIG_APP_ID_ENV],
        EnvironmentIdentifier=os.environ[APPCONFIG_ENV_ID_ENV],
        ConfigurationProfileIdentifier=os.environ[APPCONFIG_PROFILE_ID_ENV],
    )['InitialConfigurationToken']

    response = appconfig.get_latest_configuration(ConfigurationToken=session_token)
    try:
        document = json.loads(response['Configuration'].read().decode('utf-8'))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise BadConfigurationError('AppConfig returned a document that is not valid JSON.') from e

    data = _extract_lambda_config(document, lambda_name)
    logger.debug('Loaded AppConfig from AWS AppConfig.', extra={'lambdaName': lambda_name, 'build': document.get('build')})
    return data
