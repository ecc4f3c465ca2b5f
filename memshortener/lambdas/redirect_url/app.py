import logging

from memshortener.types import LambdaEvent, LambdaContext, LambdaConfiguration, LambdaResponse
from memshortener.dao.base import ShortURLBaseDAO
from memshortener.dao.exceptions import ShortURLNotFoundError
from memshortener.exceptions import InvalidShortcodeError
from memshortener.utils import guarantee_500_response
from memshortener.utils.responses import response_301, response_400, response_404
from memshortener.utils.constants import MISSING_SHORTCODE, INVALID_SHORTCODE, SHORT_URL_NOT_FOUND, REDIRECT_SUCCESS


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext, *, dao: ShortURLBaseDAO, config: LambdaConfiguration) -> LambdaResponse:
    """Handle incoming requests to redirect short URLs

    This handler follows this procedure to redirect URLs:
    - Step 1: Extract shortcode from request path
    - Step 2: Record the access (fails fast for malformed or unknown shortcodes)
    - Step 3: Get short URL record from the DAO
    - Step 4: Redirect client to target URL

    HTTP responses:
        301: Successful redirect
            headers:
                Location: target URL destination
        400: Bad client request
            message: missing or malformed shortcode in path parameters
        404: Not found
            message: no short URL with this shortcode
        500: Internal server error

    Example:
        >>> event = {'pathParameters': {'shortcode': '1'}}
        >>> response = lambda_handler(event, None, dao=dao, config=config)
        >>> response['statusCode']
        301
        >>> response['headers']['Location']
        'http://example.com'
    """
    # 1- Extract shortcode from request's path
    shortcode = (event.get('pathParameters') or {}).get('shortcode')
    if shortcode is None:
        logger.info('Missing "shortcode" in path. Responding with 400.', extra={'event': MISSING_SHORTCODE})
        return response_400(message="missing 'shortcode' in path", error_code=MISSING_SHORTCODE)

    # 2- Record the access
    try:
        hits = dao.hit(shortcode=shortcode)
    except InvalidShortcodeError:
        logger.info('Malformed shortcode. Responding with 400.', extra={'shortcode': shortcode, 'event': INVALID_SHORTCODE})
        return response_400(message='invalid short code format', error_code=INVALID_SHORTCODE)
    except ShortURLNotFoundError:
        logger.info('Short URL record not found. Responding with 404.', extra={'shortcode': shortcode, 'event': SHORT_URL_NOT_FOUND})
        return response_404(message='short URL not found', error_code=SHORT_URL_NOT_FOUND)

    # 3- Get short URL record
    # NOTE: records are never deleted, so a shortcode that was just hit always resolves
    short_url = dao.get(shortcode=shortcode)

    # 4- Redirect client to target URL
    logger.info(
        'Redirecting client to target URL. Responding with 301.',
        extra={'shortcode': shortcode, 'hits': hits, 'event': REDIRECT_SUCCESS},
    )
    return response_301(location=short_url.target)
