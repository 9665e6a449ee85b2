"""Alphabets for base-N short codes.

An alphabet is an ordered run of distinct characters; the character at
position i stands for digit value i, so the order is part of the format.
The default is 58 characters, ASCII sort order, without the look-alikes
0, O, I and l.
"""

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Union

from compact_uuid.core.errors import AlphabetError

DEFAULT_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"

UUID_BYTES = 16


def calculate_length(alphabet_size: int) -> int:
    """Return the shortest code length that holds all 128 bits of a UUID."""
    if alphabet_size < 2:
        raise AlphabetError(f"Alphabet needs at least 2 characters, got {alphabet_size}")
    factor = math.log(256) / math.log(alphabet_size)
    return math.ceil(factor * UUID_BYTES)


@dataclass(frozen=True)
class Alphabet:
    """Immutable digit set with a character -> digit lookup table.

    Built from a string or any iterable of single characters. The symbols
    are copied, so mutating the caller's list afterwards has no effect.
    """
    symbols: str
    char_to_index: MappingProxyType = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        symbols = self.symbols
        if not isinstance(symbols, str):
            symbols = list(symbols)
            for s in symbols:
                if not isinstance(s, str) or len(s) != 1:
                    raise AlphabetError(f"Alphabet symbols must be single characters, got {s!r}")
            symbols = "".join(symbols)

        if len(symbols) < 2:
            raise AlphabetError(f"Alphabet needs at least 2 characters, got {len(symbols)}")

        lookup = {}
        for i, c in enumerate(symbols):
            if c in lookup:
                raise AlphabetError(
                    f"Duplicate character {c!r} at positions {lookup[c]} and {i}")
            lookup[c] = i

        object.__setattr__(self, "symbols", symbols)
        object.__setattr__(self, "char_to_index", MappingProxyType(lookup))

    @property
    def base(self) -> int:
        return len(self.symbols)

    @property
    def zero(self) -> str:
        """The digit-0 character, used for padding."""
        return self.symbols[0]

    @property
    def default_length(self) -> int:
        return calculate_length(self.base)

    def __len__(self):
        return len(self.symbols)

    def __getitem__(self, index):
        return self.symbols[index]

    def __contains__(self, char):
        return char in self.char_to_index

    def index(self, char: str) -> int:
        """Digit value of ``char``; ValueError if it is not in the alphabet."""
        try:
            return self.char_to_index[char]
        except KeyError:
            raise ValueError(f"{char!r} is not in the alphabet") from None


AlphabetLike = Union[Alphabet, str, Iterable[str]]


def as_alphabet(alphabet: AlphabetLike) -> Alphabet:
    """Coerce a string or character sequence to an ``Alphabet``."""
    if isinstance(alphabet, Alphabet):
        return alphabet
    return Alphabet(alphabet)


DEFAULT = Alphabet(DEFAULT_ALPHABET)
