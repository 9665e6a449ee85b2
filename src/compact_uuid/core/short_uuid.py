"""ShortUuid value object.

A short code plus the alphabet it was written in. Equality and hashing
look at the code only, so two values built from the same string are
interchangeable whichever alphabet instance produced them.

    short = ShortUuid.random()
    original = short.decode()

    hex_short = ShortUuid.encode(original, "abcdef1234567890")
    assert hex_short.decode() == original
"""

import uuid as _uuid
from dataclasses import dataclass, field
from typing import Optional, Union

from compact_uuid.core import codec
from compact_uuid.core.alphabet import DEFAULT, Alphabet, AlphabetLike, as_alphabet


@dataclass(frozen=True)
class ShortUuid:
    code: str
    alphabet: Optional[Alphabet] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        alphabet = DEFAULT if self.alphabet is None else as_alphabet(self.alphabet)
        object.__setattr__(self, "alphabet", alphabet)

    @classmethod
    def random(cls, alphabet: Optional[AlphabetLike] = None) -> "ShortUuid":
        """Encode a fresh uuid4 at the alphabet's lossless length."""
        return cls.encode(_uuid.uuid4(), alphabet)

    @classmethod
    def encode(cls, uuid: Union[_uuid.UUID, str], alphabet: Optional[AlphabetLike] = None,
               length: Optional[int] = None) -> "ShortUuid":
        alphabet = DEFAULT if alphabet is None else as_alphabet(alphabet)
        return cls(codec.encode(uuid, alphabet, length), alphabet)

    def decode(self) -> _uuid.UUID:
        """Decode with the alphabet this value was built with."""
        return codec.decode(self.code, self.alphabet)

    def __str__(self):
        return self.code

    def __len__(self):
        return len(self.code)
