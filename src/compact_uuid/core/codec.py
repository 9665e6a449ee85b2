"""Base-N encoding of 128-bit UUIDs.

Codes are written least-significant digit first. Short results are padded
on the right with the alphabet's digit-0 character and long ones are cut
to the first `length` characters, which drops high-order digits. Both
rules are fixed by codes already in circulation; a length below the
alphabet's default loses bits and will not decode to the original UUID.
"""

import logging
import uuid as _uuid
from typing import Optional, Union

from compact_uuid.core.alphabet import DEFAULT, AlphabetLike, as_alphabet
from compact_uuid.core.errors import InvalidCharacterError, ValueOutOfRangeError

logger = logging.getLogger(__name__)

UUID_BITS = 128
MAX_UUID_INT = (1 << UUID_BITS) - 1


def encode_int(number: int, alphabet: AlphabetLike, length: int) -> str:
    """Encode a non-negative integer as exactly ``length`` alphabet characters."""
    if number < 0:
        raise ValueError(f"Cannot encode negative value {number}")
    if length < 0:
        raise ValueError(f"Length must be >= 0, got {length}")
    alphabet = as_alphabet(alphabet)
    base = alphabet.base

    digits = []
    while number > 0:
        number, remainder = divmod(number, base)
        digits.append(alphabet[remainder])

    if len(digits) < length:
        digits.extend(alphabet.zero * (length - len(digits)))
    return "".join(digits[:length])


def decode_int(code: str, alphabet: AlphabetLike) -> int:
    """Decode an LSD-first code to an integer. No upper bound is applied."""
    alphabet = as_alphabet(alphabet)
    base = alphabet.base

    total = 0
    place = 1
    for position, char in enumerate(code):
        if char not in alphabet:
            logger.debug("Rejected code %r: %r at position %d", code, char, position)
            raise InvalidCharacterError(char, position)
        total += alphabet.index(char) * place
        place *= base
    return total


def format_uuid(value: int) -> str:
    """Format a 128-bit integer as canonical 8-4-4-4-12 UUID text."""
    if not 0 <= value <= MAX_UUID_INT:
        logger.debug("Rejected value: needs %d bits", value.bit_length())
        raise ValueOutOfRangeError(value)
    h = f"{value:032x}"
    return f"{h[:8]}-{h[8:12]}-{h[12:16]}-{h[16:20]}-{h[20:]}"


def _as_uuid(value: Union[_uuid.UUID, str]) -> _uuid.UUID:
    if isinstance(value, _uuid.UUID):
        return value
    return _uuid.UUID(value)


def encode(uuid: Union[_uuid.UUID, str], alphabet: Optional[AlphabetLike] = None,
           length: Optional[int] = None) -> str:
    """Encode a UUID (or its canonical text) as a short code.

    Args:
        uuid: the UUID to encode.
        alphabet: digit set; defaults to DEFAULT_ALPHABET.
        length: output length; defaults to the lossless length for the
            alphabet. Shorter lengths truncate high-order digits.
    """
    alphabet = DEFAULT if alphabet is None else as_alphabet(alphabet)
    if length is None:
        length = alphabet.default_length
    return encode_int(_as_uuid(uuid).int, alphabet, length)


def decode(code: str, alphabet: Optional[AlphabetLike] = None) -> _uuid.UUID:
    """Decode a short code back to a UUID.

    Raises InvalidCharacterError for characters outside the alphabet and
    ValueOutOfRangeError when the code is worth more than 128 bits. An
    empty code decodes to the nil UUID.
    """
    alphabet = DEFAULT if alphabet is None else as_alphabet(alphabet)
    value = decode_int(code, alphabet)
    return _uuid.UUID(format_uuid(value))
