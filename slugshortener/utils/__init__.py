from slugshortener.utils.config import app_env, app_name, app_prefix, load_config
from slugshortener.utils.helpers import base_url, get_short_url, client_ip, require_environment
from slugshortener.utils.shortener import generate_slug, encode_slug, random_int
from slugshortener.utils.logging import initialize_logging


__all__ = [
    'generate_slug',
    'encode_slug',
    'random_int',
    'app_env',
    'app_name',
    'app_prefix',
    'load_config',
    'base_url',
    'get_short_url',
    'client_ip',
    'require_environment',
    'initialize_logging',
]
