# Environment variables
APP_ENV_ENV = 'APP_ENV'
APP_NAME_ENV = 'APP_NAME'
LOG_LEVEL_ENV = 'LOG_LEVEL'
AWS_SAM_LOCAL_ENV = 'AWS_SAM_LOCAL'

# AppConfig: identifiers of the application configuration document
APPCONFIG_APP_ID_ENV = 'APPCONFIG_APP_ID'
APPCONFIG_ENV_ID_ENV = 'APPCONFIG_ENV_ID'
APPCONFIG_PROFILE_ID_ENV = 'APPCONFIG_PROFILE_ID'

# Local development: Redis connection details (no AppConfig)
REDIS_HOST_ENV = 'REDIS_HOST'
REDIS_PORT_ENV = 'REDIS_PORT'
REDIS_DB_ENV = 'REDIS_DB'

# Upper bound for every durable store and cache call (seconds)
STORE_TIMEOUT_SECONDS = 10

# Slug generation
SLUG_LENGTH = 8
DEFAULT_SLUG_RANDOM_MIN = 1
DEFAULT_SLUG_RANDOM_MAX = 1_000_000
DEFAULT_SLUG_MAX_ATTEMPTS = 16

# Lambda response error codes
MISSING_TARGET_URL = 'MISSING_TARGET_URL'
INVALID_JSON_BODY = 'INVALID_JSON_BODY'
MISSING_SHORTCODE = 'MISSING_SHORTCODE'
SHORT_URL_NOT_FOUND = 'SHORT_URL_NOT_FOUND'
SHORTEN_SUCCESS = 'SHORTEN_SUCCESS'
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
