"""Request router for the short URL service

ShortenerApplication is the composition root: it loads configuration,
initializes logging, owns exactly one registry (ShortURLMemoryDAO) and
dispatches API Gateway proxy events to the matching handler.

Routes:
    GET     /                   welcome message with the endpoint map
    GET     /health             health check
    POST    /shorten            shorten a URL
    GET     /stats              registry totals
    GET     /info/{shortcode}   short URL details
    GET     /{shortcode}        redirect to the original URL
    OPTIONS *                   CORS preflight (204)

Example:
    >>> app = ShortenerApplication(config={'service_name': 'memshortener', 'base_url': 'http://localhost:8080', 'log_level': 'INFO'})
    >>> response = app({'httpMethod': 'POST', 'path': '/shorten', 'body': '{"url": "example.com"}'}, None)
    >>> response['statusCode']
    201
    >>> app({'httpMethod': 'GET', 'path': '/1'}, None)['headers']['Location']
    'http://example.com'
"""

import logging

from memshortener.types import LambdaEvent, LambdaContext, LambdaConfiguration, LambdaResponse
from memshortener.dao.base import ShortURLBaseDAO
from memshortener.dao.memory import ShortURLMemoryDAO
from memshortener.lambdas.health import app as health
from memshortener.lambdas.shorten_url import app as shorten_url
from memshortener.lambdas.redirect_url import app as redirect_url
from memshortener.lambdas.url_info import app as url_info
from memshortener.lambdas.stats import app as stats
from memshortener.utils import load_config, initialize_logging
from memshortener.utils.responses import response_200, response_204, response_404
from memshortener.utils.constants import ROUTE_NOT_FOUND


logger = logging.getLogger(__name__)

VERSION = '1.0.0'

ENDPOINTS = {
    'shorten': 'POST /shorten',
    'redirect': 'GET /{shortcode}',
    'info': 'GET /info/{shortcode}',
    'stats': 'GET /stats',
    'health': 'GET /health',
}


class ShortenerApplication:
    """Route API Gateway proxy events to request handlers

    Every application instance owns its own registry, so two applications
    never share records.

    Attributes:
        config (LambdaConfiguration):
            Application configuration (see load_config()).
        dao (ShortURLBaseDAO):
            Registry shared by all handlers of this application.
    """

    def __init__(self, config: LambdaConfiguration | None = None, dao: ShortURLBaseDAO | None = None, setup_logging: bool = False):
        """Initialize the application

        Args:
            config (LambdaConfiguration | None):
                Configuration to use. Loaded with load_config() when omitted.
            dao (ShortURLBaseDAO | None):
                Registry to use. A fresh ShortURLMemoryDAO when omitted.
            setup_logging (bool):
                If True, configure JSON logging from the configuration.
        """
        self.config = config if config is not None else load_config()
        self.dao = dao if dao is not None else ShortURLMemoryDAO()

        if setup_logging:
            initialize_logging(level=self.config['log_level'], service=self.config['service_name'])

        logger.info('Application initialized.', extra={'baseUrl': self.config['base_url'], 'version': VERSION})

    def __call__(self, event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
        method = (event.get('httpMethod') or 'GET').upper()
        segments = [segment for segment in (event.get('path') or '/').split('/') if segment]
        logger.debug('Routing request.', extra={'httpMethod': method, 'path': event.get('path')})

        if method == 'OPTIONS':
            return response_204()

        match method, segments:
            case 'GET', []:
                return response_200({'message': f'Welcome to {self.config["service_name"]}', 'version': VERSION, 'endpoints': ENDPOINTS})
            case 'GET', ['health']:
                return self._dispatch(health, event, context)
            case 'POST', ['shorten']:
                return self._dispatch(shorten_url, event, context)
            case 'GET', ['stats']:
                return self._dispatch(stats, event, context)
            case 'GET', ['info', shortcode]:
                return self._dispatch(url_info, event, context, shortcode=shortcode)
            case 'GET', [shortcode]:
                return self._dispatch(redirect_url, event, context, shortcode=shortcode)

        logger.info('No route matches request. Responding with 404.', extra={'httpMethod': method, 'path': event.get('path')})
        return response_404(message=f'no route for {method} {event.get("path") or "/"}', error_code=ROUTE_NOT_FOUND)

    def _dispatch(self, handler, event: LambdaEvent, context: LambdaContext, **path_parameters: str) -> LambdaResponse:
        if path_parameters:
            event = {**event, 'pathParameters': {**(event.get('pathParameters') or {}), **path_parameters}}
        return handler.lambda_handler(event, context, dao=self.dao, config=self.config)
