import json
import logging

from slugshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from slugshortener.services import URLMappingService
from slugshortener.dao.redis import URLRecordRedisDAO
from slugshortener.dao.cache import URLCacheRedisDAO
from slugshortener.dao.exceptions import DAOError
from slugshortener.exceptions import ConfigurationError, SlugGenerationError
from slugshortener.lambdas.responses import response_200, response_400, response_500, guarantee_500_response
from slugshortener.utils import load_config, get_short_url, client_ip, app_prefix
from slugshortener.utils.constants import (
    INVALID_JSON_BODY,
    MISSING_TARGET_URL,
    SHORTEN_SUCCESS,
)


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to shorten URLs

    This Lambda handler follows this procedure to shorten URLs:
    - Step 1: Load the application's config
    - Step 2: Extract original URL from request body
    - Step 3: Extract the caller's source IP (cache owner key)
    - Step 4: Create the URL record (mint slug, persist, cache)
    - Step 5: Respond to user with 200 success

    HTTP responses:
        200: Successful URL shortening
            message: success message
            target_url: original url (provided in request)
            short_url: newly generated short url
            shortcode: newly generated slug
        400: Bad client request
            message: indicate cause of bad request (invalid JSON or missing target_url)
        500: Internal server error
            message: indicate the server experienced an internal error

    Args:
        event (Dict[str, Any]):
            API Gateway event payload in Lambda Proxy format.
        context (Any):
            AWS Lambda context object containing runtime information.

    Returns:
        Dict[str, Any]:
            JSON-serializable response following API Gateway Lambda Proxy
            output format. Includes status code, headers, and response body.

    Example:
        >>> event = {'body': '{"target_url": "https://example.com"}'}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        200
    """
    # 1- Get application's config
    try:
        app_config = load_config('shorten_url')
    except ConfigurationError:
        logger.exception('Failed to load configuration for shorten URL function. Responding with 500.')
        return response_500()
    else:
        redis_config = {f'redis_{k}': v for k, v in app_config['redis'].items()}
        cache_config = {f'redis_{k}': v for k, v in app_config['cache'].items()}
        service_config = app_config.get('service', {})

    # 2- Extract original URL from request body
    try:
        request_body = json.loads(event.get('body') or '{}')
    except json.JSONDecodeError:
        logger.info('Invalid JSON body. Responding with 400.', extra={'event': INVALID_JSON_BODY})
        return response_400(message='invalid JSON body', error_code=INVALID_JSON_BODY)

    target_url = request_body.get('target_url') if isinstance(request_body, dict) else None
    if not target_url or not isinstance(target_url, str):
        logger.info('Missing "target_url" in body. Responding with 400.', extra={'event': MISSING_TARGET_URL})
        return response_400(message="missing 'target_url' in JSON body", error_code=MISSING_TARGET_URL)

    # 3- Extract the caller's source IP
    owner_id = client_ip(event)

    # 4- Create the URL record
    service = URLMappingService(
        URLRecordRedisDAO(**redis_config, prefix=app_prefix()),
        URLCacheRedisDAO(**cache_config, prefix=app_prefix()),
        **service_config,
    )
    try:
        record = service.create(target_url, '', owner_id)
    except SlugGenerationError as e:
        logger.exception('Could not mint a free slug. Responding with 500.', extra={'event': e.error_code})
        return response_500(error_code=e.error_code)
    except DAOError:
        logger.exception('Data store failure while shortening URL. Responding with 500.')
        return response_500()

    # 5- Return successful response to user
    short_url = get_short_url(record.identifier, event)
    logger.info(
        'Shortened URL. Responding with 200.',
        extra={'identifier': record.identifier, 'ownerId': owner_id, 'event': SHORTEN_SUCCESS},
    )
    return response_200(
        {
            'message': f'Successfully shortened {target_url} to {short_url}',
            'target_url': target_url,
            'short_url': short_url,
            'shortcode': record.identifier,
        }
    )
