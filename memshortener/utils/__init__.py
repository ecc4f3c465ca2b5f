from memshortener.utils.config import app_env, app_name, config_dir, load_config
from memshortener.utils.helpers import base_url, get_short_url, isoformat, require_environment, guarantee_500_response
from memshortener.utils.shortener import encode, decode, is_valid_shortcode
from memshortener.utils.urls import validate_url, normalize_url
from memshortener.utils.logging import initialize_logging


__all__ = [
    'encode',
    'decode',
    'is_valid_shortcode',
    'validate_url',
    'normalize_url',
    'app_env',
    'app_name',
    'config_dir',
    'load_config',
    'base_url',
    'get_short_url',
    'isoformat',
    'require_environment',
    'guarantee_500_response',
    'initialize_logging',
]
