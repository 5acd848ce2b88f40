"""Error kinds raised by the RSA core.

Every failure the core can report derives from `RSAError`, which is itself a `ValueError` since all of them stem from
an unacceptable input value. Callers (such as the CLI) catch `RSAError` and decide on presentation.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


class RSAError(ValueError):
    """Base class for all core errors."""


class NotPrimeError(RSAError):
    """A value intended as a prime failed the primality check.

    Attributes:
        value: The rejected candidate.
    """

    def __init__(self, value: int) -> None:
        super().__init__(f"The number {value} is not prime.")
        self.value = value


class DuplicatePrimesError(RSAError):
    """Both supplied primes are the same number."""

    def __init__(self, value: int) -> None:
        super().__init__(f"The primes must be distinct, both were {value}.")
        self.value = value


class ModulusTooSmallError(RSAError):
    """The modulus cannot encode every supported character uniquely."""

    def __init__(self, modulus: int) -> None:
        super().__init__(f"The modulus (n = {modulus}) is too small for encryption. Please use larger primes.")
        self.modulus = modulus


class UnsupportedCharacterError(RSAError):
    """A plaintext character lies outside the printable ASCII range.

    Attributes:
        char: The offending character, or its code point.
        position: Index of the character in the message, if known.
    """

    def __init__(self, char: str | int, position: int | None = None) -> None:
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Unsupported character {char!r}{where}. Only printable ASCII characters are supported.")
        self.char = char
        self.position = position


class MalformedCiphertextError(RSAError):
    """A ciphertext token is not an integer, is out of range, or does not decrypt to a supported character."""

    def __init__(self, token: str | int, reason: str) -> None:
        super().__init__(f"Malformed ciphertext value {token!r}: {reason}.")
        self.token = token


class UndefinedInverseError(RSAError):
    """The modular inverse does not exist, as the operands are not coprime."""

    def __init__(self, e: int, phi: int) -> None:
        super().__init__(f"{e} has no inverse modulo {phi}.")
        self.e = e
        self.phi = phi
