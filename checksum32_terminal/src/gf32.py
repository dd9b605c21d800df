"""GF(32) Galois Field arithmetic for bech32-style checksums.

This module implements arithmetic in GF(32) = GF(2^5), the field over which
bech32, bech32m and codex32 define their BCH checksums.

Field specification:
- Polynomial: x^5 + x^3 + 1 (irreducible over GF(2))
- Primitive element: alpha = 2 (the polynomial x)
- Field elements: 0-31 (5-bit integers), written with the bech32 alphabet
- Multiplicative group order: 31 (prime, so every non-zero element except 1
  is a generator)

Multiplying by alpha is a left shift; when bit 5 becomes set it is folded
back into bits 3 and 0 by XORing with 0b101001 (0x29).
"""

from __future__ import annotations

from typing import List


# Bech32 character set (maps integers 0-31 to characters)
CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"

# Reverse mapping: character -> integer
CHARSET_REV = {c: i for i, c in enumerate(CHARSET)}

# x^5 + x^3 + 1, with the x^5 term included so it clears bit 5
REDUCTION = 0x29


class Base32Error(ValueError):
    """Raised when a string contains a character outside the bech32 alphabet."""


def gf32_add(a: int, b: int) -> int:
    """Add two GF(32) elements.

    In characteristic-2 fields, addition is XOR.
    """
    return a ^ b


def gf32_sub(a: int, b: int) -> int:
    """Subtract two GF(32) elements (identical to addition)."""
    return a ^ b


def gf32_mul_alpha(a: int) -> int:
    """Multiply a GF(32) element by alpha."""
    a <<= 1
    if a & 0x20:
        a ^= REDUCTION
    return a


def gf32_mul(a: int, b: int) -> int:
    """Multiply two GF(32) elements.

    Walks the bits of ``a`` from LSB to MSB, adding the running multiple
    ``b * alpha^i`` into the result for every set bit.
    """
    res = 0
    for i in range(5):
        if (a >> i) & 1:
            res ^= b
        b = gf32_mul_alpha(b)
    return res


def _build_tables() -> tuple[List[int], List[int]]:
    exp = []
    x = 1
    for _ in range(31):
        exp.append(x)
        x = gf32_mul_alpha(x)
    # Doubled so LOG[a] + LOG[b] indexes without a modulo
    exp = exp + exp
    log = [-1] * 32
    for i in range(31):
        log[exp[i]] = i
    return exp, log


# EXP[i] = alpha^i for i in 0..61; LOG[x] = i with alpha^i = x, LOG[0] = -1.
# The checksum engine only adds and multiplies; the tables back the
# division-side operations of U5 (inverse, /, **).
EXP, LOG = _build_tables()


def gf32_inv(a: int) -> int:
    """Multiplicative inverse of a, as alpha^(31 - log a).

    Raises:
        ZeroDivisionError: If a is zero
    """
    if a == 0:
        raise ZeroDivisionError("Zero has no multiplicative inverse")
    return EXP[31 - LOG[a]]


def gf32_div(a: int, b: int) -> int:
    """Divide a by b; backs ``U5.__truediv__``.

    Raises:
        ZeroDivisionError: If b is zero
    """
    if b == 0:
        raise ZeroDivisionError("Division by zero in GF(32)")
    if a == 0:
        return 0
    return EXP[(LOG[a] - LOG[b]) % 31]


def gf32_pow(a: int, n: int) -> int:
    """Raise a to power n; backs ``U5.__pow__``. Negative n uses the inverse."""
    if n == 0:
        return 1
    if a == 0:
        if n < 0:
            raise ZeroDivisionError("Zero has no multiplicative inverse")
        return 0
    if n < 0:
        a = gf32_inv(a)
        n = -n
    return EXP[(LOG[a] * n) % 31]


def char_to_int(c: str) -> int:
    """Convert a bech32 character to its integer value (0-31).

    Only lowercase characters are accepted; case folding of whole strings is
    done by the HRP parser in ``base32``.

    Raises:
        Base32Error: If character is not in the bech32 charset
    """
    try:
        return CHARSET_REV[c]
    except KeyError:
        raise Base32Error(f"invalid bech32 character {c!r}") from None


def int_to_char(i: int, uppercase: bool = False) -> str:
    """Convert an integer (0-31) to its bech32 character.

    Raises:
        ValueError: If i is not in range 0-31
    """
    if not 0 <= i <= 31:
        raise ValueError(f"Integer must be 0-31, got {i}")
    c = CHARSET[i]
    return c.upper() if uppercase else c


class U5:
    """An element of GF(32), written as a single bech32 character."""

    __slots__ = ("_value",)

    def __init__(self, value: int = 0):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"GF(32) element must be an int, got {type(value).__name__}")
        if not 0 <= value < 32:
            raise ValueError(f"Tried to construct u5 from too-large number {value}")
        self._value = value

    @classmethod
    def from_char(cls, c: str) -> "U5":
        """Construct an element from its bech32 character."""
        return cls(char_to_int(c))

    @property
    def value(self) -> int:
        return self._value

    def mul_alpha(self) -> "U5":
        return U5(gf32_mul_alpha(self._value))

    def inverse(self) -> "U5":
        return U5(gf32_inv(self._value))

    def __add__(self, other: "U5") -> "U5":
        if not isinstance(other, U5):
            return NotImplemented
        return U5(self._value ^ other._value)

    __sub__ = __add__

    def __mul__(self, other: "U5") -> "U5":
        if not isinstance(other, U5):
            return NotImplemented
        return U5(gf32_mul(self._value, other._value))

    def __truediv__(self, other: "U5") -> "U5":
        if not isinstance(other, U5):
            return NotImplemented
        return U5(gf32_div(self._value, other._value))

    def __pow__(self, n: int) -> "U5":
        return U5(gf32_pow(self._value, n))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, U5):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((U5, self._value))

    def __bool__(self) -> bool:
        return self._value != 0

    def __int__(self) -> int:
        return self._value

    __index__ = __int__

    def __str__(self) -> str:
        return CHARSET[self._value]

    def __repr__(self) -> str:
        return f"U5('{CHARSET[self._value]}'[{self._value:05b}])"


def verify_tables() -> bool:
    """Verify the EXP/LOG tables and the field axioms.

    Returns:
        True if tables are valid

    Raises:
        AssertionError: If tables are inconsistent
    """
    for x in range(1, 32):
        assert EXP[LOG[x]] == x, f"EXP[LOG[{x}]] = {EXP[LOG[x]]} != {x}"

    for i in range(31):
        assert LOG[EXP[i]] == i, f"LOG[EXP[{i}]] = {LOG[EXP[i]]} != {i}"

    # Table multiplication must agree with the bit-serial multiply
    for a in range(1, 32):
        for b in range(1, 32):
            assert EXP[LOG[a] + LOG[b]] == gf32_mul(a, b), f"tables disagree on {a}*{b}"

    for a in range(1, 32):
        assert gf32_mul(a, gf32_inv(a)) == 1, f"{a} * inv({a}) != 1"

    for a in range(32):
        for b in range(32):
            for c in range(32):
                lhs = gf32_mul(a, gf32_add(b, c))
                rhs = gf32_add(gf32_mul(a, b), gf32_mul(a, c))
                assert lhs == rhs, f"Distributive failed for {a},{b},{c}"

    return True
