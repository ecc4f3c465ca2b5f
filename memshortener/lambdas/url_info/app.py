import logging

from memshortener.types import LambdaEvent, LambdaContext, LambdaConfiguration, LambdaResponse
from memshortener.dao.base import ShortURLBaseDAO
from memshortener.dao.exceptions import ShortURLNotFoundError
from memshortener.exceptions import InvalidShortcodeError
from memshortener.utils import base_url, get_short_url, isoformat, guarantee_500_response
from memshortener.utils.responses import response_200, response_400, response_404
from memshortener.utils.constants import MISSING_SHORTCODE, INVALID_SHORTCODE, SHORT_URL_NOT_FOUND


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext, *, dao: ShortURLBaseDAO, config: LambdaConfiguration) -> LambdaResponse:
    """Handle incoming requests for short URL details

    Looking up details does not count as an access.

    HTTP responses:
        200: Short URL details
            id, original_url, short_code, short_url, created_at, access_count
        400: missing or malformed shortcode in path parameters
        404: no short URL with this shortcode
        500: Internal server error
    """
    shortcode = (event.get('pathParameters') or {}).get('shortcode')
    if shortcode is None:
        return response_400(message="missing 'shortcode' in path", error_code=MISSING_SHORTCODE)

    try:
        short_url = dao.get(shortcode=shortcode)
    except InvalidShortcodeError:
        logger.info('Malformed shortcode. Responding with 400.', extra={'shortcode': shortcode, 'event': INVALID_SHORTCODE})
        return response_400(message='invalid short code format', error_code=INVALID_SHORTCODE)
    except ShortURLNotFoundError:
        logger.info('Short URL record not found. Responding with 404.', extra={'shortcode': shortcode, 'event': SHORT_URL_NOT_FOUND})
        return response_404(message='short URL not found', error_code=SHORT_URL_NOT_FOUND)

    return response_200(
        {
            'id': short_url.id,
            'original_url': short_url.target,
            'short_code': short_url.shortcode,
            'short_url': get_short_url(short_url.shortcode, base_url(event, default=config['base_url'])),
            'created_at': isoformat(short_url.created_at),
            'access_count': short_url.hits,
        }
    )
