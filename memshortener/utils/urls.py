"""Long URL validation and normalization

The registry stores URLs exactly as it receives them, so every URL must pass
through this module first. Two submissions that normalize to the same string
share one short URL.

Functions:
    validate_url(raw_url) -> None
        Reject URLs without a usable http(s) scheme and host.
    normalize_url(raw_url) -> str
        Canonicalize scheme and host, defaulting the scheme to http.

Example:
    >>> validate_url('example.com')
    >>> normalize_url('example.com')
    'http://example.com'
    >>> normalize_url('HTTPS://Example.COM/Path?q=1')
    'https://example.com/Path?q=1'
"""

from urllib.parse import urlsplit, urlunsplit, SplitResult

import validators

from memshortener.exceptions import InvalidURLError


ALLOWED_SCHEMES = frozenset({'http', 'https'})


def _split(raw_url: str) -> SplitResult:
    """Split raw_url, retrying with an http:// prefix when scheme or host is missing."""
    try:
        components = urlsplit(raw_url)
        if not components.scheme or not components.netloc:
            components = urlsplit(f'http://{raw_url}')
        # Accessing .port validates it (raises ValueError when out of range)
        components.port  # noqa: B018
    except ValueError as e:
        raise InvalidURLError(f"Invalid URL '{raw_url}': {e}.") from e
    return components


def validate_url(raw_url: str) -> None:
    """Ensure raw_url is an http(s) URL with a plausible host

    Rules:
        - must not be blank;
        - must have a host, possibly after prefixing 'http://';
        - scheme must be http or https;
        - host must contain a dot, unless it is 'localhost';
        - the http(s) form must pass validators.url().

    Raises:
        InvalidURLError: If any rule is violated.

    Example:
        >>> validate_url('ftp://example.com')
        Traceback (most recent call last):
            ...
        memshortener.exceptions.InvalidURLError: Invalid URL 'ftp://example.com': unsupported scheme 'ftp'.
    """
    if not isinstance(raw_url, str) or not raw_url.strip():
        raise InvalidURLError('Invalid URL: value must be a non-blank string.')
    if raw_url != raw_url.strip() or any(character.isspace() for character in raw_url):
        raise InvalidURLError(f"Invalid URL '{raw_url}': whitespace is not allowed.")

    components = _split(raw_url)
    scheme = components.scheme.lower()
    host = (components.hostname or '').lower()

    if scheme not in ALLOWED_SCHEMES:
        raise InvalidURLError(f"Invalid URL '{raw_url}': unsupported scheme '{scheme}'.")
    if not host:
        raise InvalidURLError(f"Invalid URL '{raw_url}': missing host.")
    if '.' not in host and host != 'localhost':
        raise InvalidURLError(f"Invalid URL '{raw_url}': host '{host}' is not a domain name.")
    if not validators.url(normalize_url(raw_url), simple_host=host == 'localhost', strict_query=False):
        raise InvalidURLError(f"Invalid URL '{raw_url}': not a well-formed URL.")


def normalize_url(raw_url: str) -> str:
    """Return the canonical form of an already validated URL

    The scheme defaults to http and is lower-cased along with the host.
    User info, port, path, query and fragment are kept as given.

    Example:
        >>> normalize_url('Example.com/a/B')
        'http://example.com/a/B'
    """
    components = _split(raw_url)

    netloc = components.hostname or ''
    if ':' in netloc:  # IPv6 literal
        netloc = f'[{netloc}]'
    if components.port is not None:
        netloc = f'{netloc}:{components.port}'
    if '@' in components.netloc:
        userinfo = components.netloc.rsplit('@', 1)[0]
        netloc = f'{userinfo}@{netloc}'

    return urlunsplit((components.scheme.lower(), netloc, components.path, components.query, components.fragment))
