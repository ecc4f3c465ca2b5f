import json
import logging

from memshortener.types import LambdaEvent, LambdaContext, LambdaConfiguration, LambdaResponse
from memshortener.dao.base import ShortURLBaseDAO
from memshortener.exceptions import InvalidURLError
from memshortener.utils import validate_url, normalize_url, base_url, get_short_url, isoformat, guarantee_500_response
from memshortener.utils.responses import response_201, response_400
from memshortener.utils.constants import INVALID_JSON_BODY, MISSING_URL, INVALID_URL, SHORT_URL_CREATED


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext, *, dao: ShortURLBaseDAO, config: LambdaConfiguration) -> LambdaResponse:
    """Handle incoming requests to shorten URLs

    This handler follows this procedure to shorten URLs:
    - Step 1: Extract original URL from request body
    - Step 2: Validate and normalize the original URL
    - Step 3: Create (or reuse) the short URL record via the DAO
    - Step 4: Respond to user with 201 created

    Submitting a URL that was already shortened returns the existing record.

    HTTP responses:
        201: Successful URL shortening
            id: numeric identifier of the record
            original_url: normalized original URL
            short_code: shortcode of the record
            short_url: full short URL
            created_at: ISO-8601 creation time
        400: Bad client request
            message: indicate cause of bad request (invalid JSON, missing or invalid url)
        500: Internal server error

    Args:
        event (LambdaEvent):
            API Gateway event payload in Lambda Proxy format.
        context (LambdaContext):
            Runtime context object (not used directly).
        dao (ShortURLBaseDAO):
            Registry holding the short URL records.
        config (LambdaConfiguration):
            Application configuration (see load_config()).

    Returns:
        LambdaResponse:
            API Gateway-compatible response including statusCode, headers, and body.

    Example:
        >>> event = {'body': '{"url": "example.com"}'}
        >>> response = lambda_handler(event, None, dao=dao, config=config)
        >>> response['statusCode']
        201
        >>> json.loads(response['body'])['short_url']
        'http://localhost:8080/1'
    """
    # 1- Extract original URL from request body
    try:
        request_body = json.loads(event.get('body') or '{}')
    except json.JSONDecodeError:
        logger.info('Invalid JSON body. Responding with 400.', extra={'event': INVALID_JSON_BODY})
        return response_400(message='invalid JSON body', error_code=INVALID_JSON_BODY)

    raw_url = request_body.get('url') if isinstance(request_body, dict) else None
    if not raw_url:
        logger.info('Missing "url" in request body. Responding with 400.', extra={'event': MISSING_URL})
        return response_400(message="missing 'url' in JSON body", error_code=MISSING_URL)

    # 2- Validate and normalize the original URL
    try:
        validate_url(raw_url)
    except InvalidURLError as e:
        logger.info('Rejected invalid URL. Responding with 400.', extra={'event': INVALID_URL, 'reason': str(e)})
        return response_400(message='the provided URL is not valid', error_code=INVALID_URL)
    target_url = normalize_url(raw_url)

    # 3- Create (or reuse) the short URL record
    short_url = dao.create(target_url)
    short_url_string = get_short_url(short_url.shortcode, base_url(event, default=config['base_url']))

    # 4- Respond to user with 201 created
    logger.info(
        'Shortened URL. Responding with 201.',
        extra={'shortcode': short_url.shortcode, 'id': short_url.id, 'event': SHORT_URL_CREATED},
    )
    return response_201(
        {
            'id': short_url.id,
            'original_url': short_url.target,
            'short_code': short_url.shortcode,
            'short_url': short_url_string,
            'created_at': isoformat(short_url.created_at),
        }
    )
