"""128-bit identifiers and a generator of random version-4 identifiers."""

from __future__ import annotations

import functools
import random
import re
from dataclasses import dataclass

_MASK64 = (1 << 64) - 1
_FNV_OFFSET = 2166136261
_FNV_PRIME = 16777619
_HEX_PREFIX = re.compile(r"\s*\+?(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")


def _parse_hex(chunk: str) -> int:
    """Read the leading hexadecimal number of ``chunk``, ignoring what follows."""
    match = _HEX_PREFIX.match(chunk)
    if match is None:
        raise ValueError(f"invalid hexadecimal digits: {chunk!r}")
    return int(match.group(1), 16)


@functools.total_ordering
@dataclass(frozen=True)
class UUID:
    """A 128-bit identifier stored as two 64-bit halves.

    The all-zero value is the empty identifier and prints as an empty string.
    """

    high: int = 0
    low: int = 0

    def __post_init__(self) -> None:
        for name, value in (("high", self.high), ("low", self.low)):
            if not 0 <= value <= _MASK64:
                raise ValueError(f"{name} must fit in 64 bits, got {value}")

    @classmethod
    def parse(cls, text: str) -> UUID:
        """Parse ``xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx``.

        Hyphens are ignored. Empty text, or text that does not hold exactly
        32 digits once hyphens are removed, gives the empty identifier.
        """
        if not text:
            return cls()
        digits = text.replace("-", "")
        if len(digits) != 32:
            return cls()
        return cls(_parse_hex(digits[:16]), _parse_hex(digits[16:]))

    def is_empty(self) -> bool:
        return self.high == 0 and self.low == 0

    def __str__(self) -> str:
        if self.is_empty():
            return ""
        digits = f"{self.high:016x}{self.low:016x}"
        return f"{digits[:8]}-{digits[8:12]}-{digits[12:16]}-{digits[16:20]}-{digits[20:]}"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, UUID):
            return NotImplemented
        return (self.high, self.low) < (other.high, other.low)

    def __hash__(self) -> int:
        value = _FNV_OFFSET
        for part in (self.high >> 32, self.high & 0xFFFFFFFF, self.low >> 32, self.low & 0xFFFFFFFF):
            value ^= part
            value = (value * _FNV_PRIME) & _MASK64
        return value


class UUIDGenerator:
    """Produces random RFC 4122 version-4 identifiers."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def __call__(self) -> UUID:
        high = self._rng.getrandbits(64)
        low = self._rng.getrandbits(64)
        high = (high & 0xFFFFFFFFFFFF0FFF) | 0x0000000000004000
        low = (low & 0x3FFFFFFFFFFFFFFF) | 0x8000000000000000
        return UUID(high, low)