"""Strings of GF(32) elements and the bech32 human-readable-prefix form."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple, Union

from gf32 import CHARSET, Base32Error, U5, char_to_int

HRP_SEPARATOR = "1"


def split_hrp(s: str) -> Tuple[str, str]:
    """Split ``s`` at its last '1' into (hrp, data).

    Without a separator the whole string is data and the HRP is empty.
    """
    pos = s.rfind(HRP_SEPARATOR)
    if pos < 0:
        return "", s
    return s[:pos], s[pos + 1 :]


def _is_single_case(value: str) -> bool:
    return value == value.lower() or value == value.upper()


def hrp_expand(hrp: str) -> List[int]:
    """Expand an HRP into the values that prefix it in the checksum.

    High 3 bits of every byte, a zero separator, then the low 5 bits.
    """
    if not hrp.isascii():
        raise Base32Error(f"HRP {hrp!r} must be ASCII")
    raw = hrp.encode("ascii")
    return [b >> 5 for b in raw] + [0] + [b & 0x1F for b in raw]


class U5String:
    """An ordered sequence of GF(32) elements.

    Renders with the bech32 alphabet via ``str()``.
    """

    __slots__ = ("_chars",)

    def __init__(self, chars: Iterable[U5] = ()):
        self._chars: List[U5] = list(chars)

    @classmethod
    def from_str(cls, s: str) -> "U5String":
        """Parse a plain bech32-alphabet string, one element per character."""
        return cls(U5(char_to_int(c)) for c in s)

    @classmethod
    def from_values(cls, values: Iterable[int]) -> "U5String":
        """Build a string from small integers, e.g. a generator's coefficients."""
        return cls(U5(v) for v in values)

    @classmethod
    def from_hrpstring(cls, s: str) -> "U5String":
        """Parse a string with a human-readable prefix.

        The result is the expanded HRP followed by the data part, which is
        exactly the message a bech32-style checksum covers. An all-uppercase
        string is folded to lowercase first; mixed case is rejected.
        Non-ASCII input is rejected before folding, since some non-ASCII
        characters lowercase into the alphabet (U+212A becomes 'k').
        """
        if not s.isascii():
            raise Base32Error(f"string {s!r} contains non-ASCII characters")
        if not _is_single_case(s):
            raise Base32Error(f"string {s!r} mixes upper and lower case")
        hrp, data = split_hrp(s.lower())
        res = cls.from_values(hrp_expand(hrp))
        res.extend(cls.from_str(data))
        return res

    def push(self, x: U5) -> None:
        """Append one element."""
        self._chars.append(x)

    def extend(self, xs: Iterable[U5]) -> None:
        self._chars.extend(xs)

    def is_empty(self) -> bool:
        return not self._chars

    def is_all_zero(self) -> bool:
        """Whether every element is zero (true for the empty string)."""
        return not any(self._chars)

    def to_values(self) -> List[int]:
        return [int(c) for c in self._chars]

    def to_bytes(self, pad: bool = False) -> bytes:
        """Pack the 5-bit elements MSB first into bytes.

        Leftover bits that do not fill a byte are dropped, or zero-padded on
        the right into one more byte when ``pad`` is set.
        """
        acc = 0
        bits = 0
        out = bytearray()
        for c in self._chars:
            acc = (acc << 5) | int(c)
            bits += 5
            while bits >= 8:
                bits -= 8
                out.append((acc >> bits) & 0xFF)
            acc &= (1 << bits) - 1
        if pad and bits:
            out.append((acc << (8 - bits)) & 0xFF)
        return bytes(out)

    def __len__(self) -> int:
        return len(self._chars)

    def __iter__(self) -> Iterator[U5]:
        return iter(self._chars)

    def __getitem__(self, idx: Union[int, slice]):
        if isinstance(idx, slice):
            return U5String(self._chars[idx])
        return self._chars[idx]

    def __setitem__(self, idx: int, value: U5) -> None:
        if not isinstance(value, U5):
            raise TypeError(f"U5String holds U5 elements, got {type(value).__name__}")
        self._chars[idx] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, U5String):
            return NotImplemented
        return self._chars == other._chars

    __hash__ = None

    def __str__(self) -> str:
        return "".join(CHARSET[int(c)] for c in self._chars)

    def __repr__(self) -> str:
        return f"u5({self})"
