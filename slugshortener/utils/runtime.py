"""Runtime utilities

Functions:
    running_locally() -> bool:
        True if running in local development or SAM, False otherwise.

Example:
    >>> from slugshortener.utils.runtime import running_locally
    >>> os.environ['APP_ENV'] = 'local'
    >>> running_locally()
    True
"""

import os

from slugshortener.utils.constants import APP_ENV_ENV, AWS_SAM_LOCAL_ENV


def running_locally() -> bool:
    """Check if the code runs locally (APP_ENV=local, the default, or `sam local invoke`)"""
    env = os.getenv(APP_ENV_ENV, 'local').lower()
    return env == 'local' or os.getenv(AWS_SAM_LOCAL_ENV) == 'true'
