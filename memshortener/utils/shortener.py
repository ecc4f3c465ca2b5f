"""Shortcode encoding utility

This module converts between unsigned 64-bit integer identifiers and their
compact, URL-safe Base62 representation (shortcodes).

The alphabet order is part of the public contract: every shortcode ever
issued depends on it, so it must never change once deployed.

Functions:
    encode(number) -> str:
        Encode a non-negative integer into its Base62 shortcode.

    decode(shortcode) -> int:
        Decode a Base62 shortcode back into its integer identifier.

    is_valid_shortcode(shortcode) -> bool:
        Check whether a value is a well-formed Base62 shortcode.

Example:
    >>> from memshortener.utils import encode, decode
    >>> encode(62)
    '10'
    >>> decode('10')
    62
"""

import string

from memshortener.exceptions import InvalidShortcodeError
from memshortener.utils.constants import MAX_ID


ALPHABET = string.digits + string.ascii_lowercase + string.ascii_uppercase
BASE = len(ALPHABET)  # 10 digits + 26 lowercase + 26 uppercase

_VALUES = {character: value for value, character in enumerate(ALPHABET)}


def encode(number: int) -> str:
    """Encode a non-negative integer into a Base62 shortcode.

    The output never carries leading zero symbols, except for the number 0
    itself which encodes to the single character '0'.

    Args:
        number (int):
            Identifier to encode, in range [0, 2**64 - 1].

    Returns:
        str: Base62 shortcode.

    Raises:
        TypeError: If number is not an integer.
        ValueError: If number is negative or doesn't fit in 64 unsigned bits.

    Example:
        >>> encode(0)
        '0'
        >>> encode(61)
        'Z'
        >>> encode(3844)
        '100'
    """
    if not isinstance(number, int) or isinstance(number, bool):
        raise TypeError(f'Number must be of type integer (given type: {type(number)}).')
    if number < 0:
        raise ValueError(f'Number must be a non-negative integer (given value: {number}).')
    if number > MAX_ID:
        raise ValueError(f'Number must fit in 64 unsigned bits (given value: {number}).')

    if number == 0:
        return ALPHABET[0]

    symbols = []
    while number:
        number, remainder = divmod(number, BASE)
        symbols.append(ALPHABET[remainder])
    return ''.join(reversed(symbols))


def decode(shortcode: str) -> int:
    """Decode a Base62 shortcode into its integer identifier.

    Args:
        shortcode (str):
            Base62 shortcode, most significant symbol first.

    Returns:
        int: The decoded identifier.

    Raises:
        TypeError: If shortcode is not a string.
        InvalidShortcodeError:
            If shortcode is empty, contains a character outside the Base62
            alphabet, or decodes to a value above 2**64 - 1.

    Example:
        >>> decode('Z')
        61
        >>> decode('12!')
        Traceback (most recent call last):
            ...
        memshortener.exceptions.InvalidShortcodeError: Invalid character '!' at position 2 in shortcode '12!'.
    """
    if not isinstance(shortcode, str):
        raise TypeError(f'Shortcode must be of type string (given type: {type(shortcode)}).')
    if not shortcode:
        raise InvalidShortcodeError('Shortcode must be a non-empty string.')

    result = 0
    for position, character in enumerate(shortcode):
        value = _VALUES.get(character)
        if value is None:
            raise InvalidShortcodeError(f"Invalid character '{character}' at position {position} in shortcode '{shortcode}'.")
        result = result * BASE + value

    if result > MAX_ID:
        raise InvalidShortcodeError(f"Shortcode '{shortcode}' decodes beyond the 64-bit identifier space.")
    return result


def is_valid_shortcode(shortcode: object) -> bool:
    """Check whether a value is a well-formed Base62 shortcode.

    NOTE: only the format is checked. A valid shortcode may still be too
          long to decode into a 64-bit identifier.

    Example:
        >>> is_valid_shortcode('abc123')
        True
        >>> is_valid_shortcode('')
        False
        >>> is_valid_shortcode('abc-123')
        False
    """
    return isinstance(shortcode, str) and bool(shortcode) and all(character in _VALUES for character in shortcode)
