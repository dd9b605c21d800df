"""BCH checksums over GF(32): bech32, bech32m, codex32 and long codex32.

Every code is described by two bech32-alphabet strings:

- the modulus, the generator polynomial with coefficient i at position i.
  Its leading coefficient is always 1 ('p') and is implicit in ``polymod``,
  so the stored string ends in 'p' but that final character is never read.
- the residue, the value ``polymod`` must produce for a valid string.

A string is checksummed by treating its HRP expansion plus data as a
polynomial over GF(32), appending k zero coefficients, reducing modulo the
generator and adding the target residue. Appending the result shifts the
residue of the whole string to exactly the target.

To add a code, render its generator coefficient list as a string with
``U5String.from_values(gen)`` and add it to ``CHECKSUM_DEFINITIONS``
together with a residue string of one character fewer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Tuple

from base32 import U5String
from gf32 import Base32Error, U5


# name -> (modulus string, target residue string)
CHECKSUM_DEFINITIONS: Dict[str, Tuple[str, str]] = {
    "bech32": ("ja45kap", "qqqqqp"),
    "bech32m": ("ja45kap", "4usv9r"),
    "codex32": ("sscmleeeqg3mep", "secretshare32"),
    "long-codex32": ("hyk9x4hx4ef6e20p", "secretshare32ex"),
}


class ChecksumDefinitionError(ValueError):
    """Raised when a checksum's modulus or residue string is malformed."""


class UnknownChecksumError(KeyError):
    """Raised when a checksum name is not in the registry."""

    def __init__(self, name: str, available: Iterable[str]):
        self.name = name
        self.available = sorted(available)
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown checksum {self.name}. Available checksums: {', '.join(self.available)}"


@dataclass(frozen=True)
class Checksum:
    """A BCH checksum defined by its generator and target residue.

    Instances are immutable and shared through the registry; ``modulus`` and
    ``residue`` hand out fresh ``U5String`` copies.
    """

    name: str
    modulus_str: str
    residue_str: str
    _modulus: Tuple[U5, ...] = field(init=False, repr=False, compare=False)
    _residue: Tuple[U5, ...] = field(init=False, repr=False, compare=False)
    _generator: Tuple[U5, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        modulus_str = self.modulus_str
        residue_str = self.residue_str
        if not modulus_str.isascii():
            raise ChecksumDefinitionError(f'Modulus string "{modulus_str}" must be ASCII')
        if not residue_str.isascii():
            raise ChecksumDefinitionError(f'Residue string "{residue_str}" must be ASCII')
        if not modulus_str.endswith("p"):
            raise ChecksumDefinitionError(f'Modulus string "{modulus_str}" should end in \'p\'.')
        if len(modulus_str) != len(residue_str) + 1:
            raise ChecksumDefinitionError(
                f'Modulus string "{modulus_str}" must be one character longer than '
                f'residue string "{residue_str}"'
            )
        try:
            modulus = tuple(U5String.from_str(modulus_str))
        except Base32Error as exc:
            raise ChecksumDefinitionError(
                f'Modulus string "{modulus_str}" was not a u5 string: {exc}'
            ) from exc
        try:
            residue = tuple(U5String.from_str(residue_str))
        except Base32Error as exc:
            raise ChecksumDefinitionError(
                f'Residue string "{residue_str}" was not a u5 string: {exc}'
            ) from exc
        object.__setattr__(self, "_modulus", modulus)
        object.__setattr__(self, "_residue", residue)
        object.__setattr__(self, "_generator", tuple(reversed(modulus[:-1])))

    @property
    def modulus(self) -> U5String:
        return U5String(self._modulus)

    @property
    def residue(self) -> U5String:
        """The target residue of a valid string."""
        return U5String(self._residue)

    @property
    def degree(self) -> int:
        """Number of checksum characters."""
        return len(self._residue)

    def _shift(self, register: list) -> None:
        # Multiply the remainder by x: the x^(k-1) coefficient becomes x^k,
        # which is reduced by subtracting xn * g(x). The generator is stored
        # lowest coefficient first and the register highest first, so read
        # it backwards, skipping the implicit leading 1.
        xn = register[0]
        k = len(register)
        for i in range(1, k):
            register[i - 1] = register[i]
        register[k - 1] = U5(0)
        for i, g in enumerate(self._generator):
            register[i] += g * xn

    def polymod(self, values: Iterable[U5], add_residue: bool = True) -> U5String:
        """Reduce ``values`` modulo the generator.

        The register starts at the polynomial 1. With ``add_residue`` the
        target residue is added to the result, so a valid string gives zero.
        """
        k = self.degree
        register = [U5(0)] * k
        register[k - 1] = U5(1)
        for c in values:
            self._shift(register)
            register[k - 1] += c
        if add_residue:
            for i, r in enumerate(self._residue):
                register[i] += r
        return U5String(register)

    def create_checksum(self, s: str) -> U5String:
        """Return the k checksum characters for a string with HRP."""
        data = U5String.from_hrpstring(s)
        data.extend([U5(0)] * self.degree)
        return self.polymod(data)

    def checksum(self, s: str) -> str:
        """Compute the checksum of a string (with HRP) and tack it onto the end."""
        suffix = str(self.create_checksum(s))
        if s and s == s.upper() and s != s.lower():
            suffix = suffix.upper()
        return s + suffix

    def validate_checksum(self, s: str) -> bool:
        """Check whether an already-checksummed string is valid."""
        return self.polymod(U5String.from_hrpstring(s)).is_all_zero()

    def residue_of(self, s: str) -> U5String:
        """Residue of a string with HRP, without the target added."""
        return self.polymod(U5String.from_hrpstring(s), add_residue=False)


def get_checksums() -> Dict[str, Checksum]:
    """Return the master list of checksums supported by this tool."""
    return {
        name: Checksum(name, modulus, residue)
        for name, (modulus, residue) in CHECKSUM_DEFINITIONS.items()
    }


_REGISTRY = get_checksums()


def checksum_names() -> list[str]:
    return list(_REGISTRY)


def get_checksum(name: str) -> Checksum:
    """Look up a registered checksum by its case-sensitive name."""
    try:
        return _REGISTRY[name]
    except KeyError:
        raise UnknownChecksumError(name, _REGISTRY) from None


def checksum(name: str, s: str) -> str:
    """Append the named checksum to ``s``."""
    return get_checksum(name).checksum(s)


def validate_checksum(name: str, s: str) -> bool:
    """Check ``s`` against the named checksum."""
    return get_checksum(name).validate_checksum(s)
