"""Exceptions raised by the short code codec.

All of them are ValueErrors, so callers that only care about bad input
can keep catching ValueError.
"""


class CompactUuidError(ValueError):
    """Base class for codec errors."""


class AlphabetError(CompactUuidError):
    """Alphabet is too small, repeats a character, or has non-character symbols."""


class DecodeError(CompactUuidError):
    """A short code could not be turned back into a UUID."""


class InvalidCharacterError(DecodeError):
    def __init__(self, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(f"Invalid character {character!r} at position {position}")


class ValueOutOfRangeError(DecodeError):
    def __init__(self, value: int):
        self.value = value
        super().__init__(
            f"Decoded value out of range: needs {value.bit_length()} bits, UUIDs hold 128")
