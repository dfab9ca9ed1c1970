import logging

from slugshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from slugshortener.services import URLMappingService
from slugshortener.dao.redis import URLRecordRedisDAO
from slugshortener.dao.cache import URLCacheRedisDAO
from slugshortener.dao.exceptions import DAOError
from slugshortener.exceptions import ConfigurationError
from slugshortener.lambdas.responses import response_302, response_400, response_404, response_500, guarantee_500_response
from slugshortener.utils import load_config, get_short_url, client_ip, app_prefix
from slugshortener.utils.constants import (
    MISSING_SHORTCODE,
    SHORT_URL_NOT_FOUND,
    REDIRECT_SUCCESS,
)


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to redirect URLs

    This Lambda handler follows this procedure to redirect URLs:
    - Step 1: Load the application's config
    - Step 2: Extract shortcode from request path
    - Step 3: Look the URL record up (cache first)
    - Step 4: Redirect client to target URL

    HTTP responses:
        302: Successful redirect
            headers:
                Location: target URL destination
        400: Bad client request
            message: missing shortcode in path parameters
        404: Not found
            message: no URL record for the shortcode
        500: Internal server error
            message: server experienced an internal error

    Args:
        event (dict):
            API Gateway event payload containing the shortcode path parameter.
        context (LambdaContext):
            AWS Lambda runtime context object (not used directly).

    Returns:
        dict:
            API Gateway-compatible response including statusCode, headers, and body.

    Example:
        >>> event = {'pathParameters': {'shortcode': 'abcDEF12'}}
        >>> response = lambda_handler(event, None)
        >>> response['headers']['Location']
        'https://example.com/my-page'
    """
    # 1- Get application's config
    try:
        app_config = load_config('redirect_url')
    except ConfigurationError:
        logger.exception('Failed to load configuration for redirect URL function. Responding with 500.')
        return response_500()
    else:
        redis_config = {f'redis_{k}': v for k, v in app_config['redis'].items()}
        cache_config = {f'redis_{k}': v for k, v in app_config['cache'].items()}
        service_config = app_config.get('service', {})

    # 2- Extract shortcode from request's path
    shortcode = (event.get('pathParameters') or {}).get('shortcode')
    if not shortcode:
        logger.info('Missing "shortcode" in path. Responding with 400.', extra={'event': MISSING_SHORTCODE})
        return response_400(message="missing 'shortcode' in path", error_code=MISSING_SHORTCODE)
    owner_id = client_ip(event)
    logger.debug('Client requested short URL %s.', get_short_url(shortcode, event))

    # 3- Look the URL record up
    service = URLMappingService(
        URLRecordRedisDAO(**redis_config, prefix=app_prefix()),
        URLCacheRedisDAO(**cache_config, prefix=app_prefix()),
        **service_config,
    )
    try:
        record = service.lookup(shortcode, owner_id)
    except DAOError:
        logger.exception('Data store failure while resolving short URL. Responding with 500.', extra={'shortcode': shortcode})
        return response_500()

    if record is None:
        logger.info(
            'URL record not found. Responding with 404.',
            extra={'shortcode': shortcode, 'ownerId': owner_id, 'event': SHORT_URL_NOT_FOUND},
        )
        return response_404(message=f"short url {get_short_url(shortcode, event)} doesn't exist", error_code=SHORT_URL_NOT_FOUND)

    # 4- Redirect client to target URL
    logger.info(
        'Redirecting client to target URL. Responding with 302.',
        extra={'shortcode': shortcode, 'event': REDIRECT_SUCCESS},
    )
    return response_302(location=record.original_url)
