# Environment variables: application
APP_ENV_ENV = 'APP_ENV'
APP_NAME_ENV = 'APP_NAME'
CONFIG_DIR_ENV = 'CONFIG_DIR'
LOG_LEVEL_ENV = 'LOG_LEVEL'
BASE_URL_ENV = 'BASE_URL'
AWS_SAM_LOCAL_ENV = 'AWS_SAM_LOCAL'

# Defaults used when the config document leaves a key out
DEFAULT_APP_NAME = 'memshortener'
DEFAULT_BASE_URL = 'http://localhost:8080'
DEFAULT_LOG_LEVEL = 'INFO'

# Largest identifier the registry may issue (unsigned 64-bit)
MAX_ID = 2**64 - 1

# Permissive CORS headers attached to every HTTP response
CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Methods': 'GET, POST, PUT, DELETE, OPTIONS',
    'Access-Control-Allow-Headers': 'Origin, Content-Type, Content-Length, Accept-Encoding, X-CSRF-Token, Authorization',
}

# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
INVALID_JSON_BODY = 'INVALID_JSON_BODY'
MISSING_URL = 'MISSING_URL'
INVALID_URL = 'INVALID_URL'
MISSING_SHORTCODE = 'MISSING_SHORTCODE'
INVALID_SHORTCODE = 'INVALID_SHORTCODE'
SHORT_URL_NOT_FOUND = 'SHORT_URL_NOT_FOUND'
ROUTE_NOT_FOUND = 'ROUTE_NOT_FOUND'

# Log events
SHORT_URL_CREATED = 'SHORT_URL_CREATED'
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
