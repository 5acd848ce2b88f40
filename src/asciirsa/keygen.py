"""Core Key Generation Utility, covering primality, random toy primes and the derivation of key pairs.

Keys are derived textbook style from two small primes: the public exponent is the smallest value coprime with the
totient and the private exponent is its modular inverse. Primes are tested by trial division and, when not supplied
by the caller, drawn from a general-purpose (non cryptographic) random source.

Typical usage example:

    p, q = generate_primes()
    kp = generate_key_pair(61, 53)
    check_prime(997)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import random
from typing import NamedTuple
import warnings

from asciirsa import arith
from asciirsa.errors import DuplicatePrimesError
from asciirsa.errors import ModulusTooSmallError
from asciirsa.errors import NotPrimeError

PRIME_RANGE: tuple[int, int] = (100, 1000)
# Largest 8-bit code point, the modulus has to exceed it.
MIN_MODULUS: int = 255


class KeyPair(NamedTuple):
    """A textbook RSA key pair, alongside the primes it was derived from.

    Attributes:
        modulus: The product of the two primes.
        public_exponent: The encryption exponent.
        private_exponent: The decryption exponent.
        p: The first prime.
        q: The second prime.
    """
    modulus: int
    public_exponent: int
    private_exponent: int
    p: int
    q: int

    @property
    def public(self) -> tuple[int, int]:
        return self.modulus, self.public_exponent

    @property
    def private(self) -> tuple[int, int]:
        return self.modulus, self.private_exponent


def check_prime(candidate: int) -> bool:
    """Deterministic primality test by trial division.

    Skips multiples of 2 and 3, checking the divisors 6k-1 and 6k+1 up to the square root of `candidate`.

    Args:
        candidate: The integer to test. Any value is accepted.

    Returns:
        True if `candidate` is prime, False otherwise.
    """
    if candidate <= 1:
        return False
    if candidate <= 3:
        return True
    if candidate % 2 == 0 or candidate % 3 == 0:
        return False
    i = 5
    while i * i <= candidate:
        if candidate % i == 0 or candidate % (i + 2) == 0:
            return False
        i += 6
    return True


def random_prime(low: int, high: int, rng: random.Random | None = None) -> int:
    """Draws a random prime from the inclusive range [low, high].

    Samples uniformly until a prime is hit. There is no iteration cap, so the range has to contain a prime.
    Not cryptographically secure.

    Args:
        low: Lower bound, inclusive.
        high: Upper bound, inclusive.
        rng: Random source to draw from. Defaults to the module level generator of `random`.

    Returns:
        A prime in [low, high].

    Raises:
        ValueError: If `low` > `high`.
    """
    if low > high:
        raise ValueError("low must be <= high")
    randint = rng.randint if rng is not None else random.randint
    while True:
        option = randint(low, high)
        if check_prime(option):
            return option


def generate_primes(low: int = PRIME_RANGE[0],
                    high: int = PRIME_RANGE[1],
                    rng: random.Random | None = None) -> tuple[int, int]:
    """Generates a pair of distinct random primes.

    Args:
        low: Lower bound, inclusive. Defaults to 100.
        high: Upper bound, inclusive. Defaults to 1000.
            The range must hold at least two primes.
        rng: Random source, passed to `random_prime()`.

    Returns:
        Two distinct primes from [low, high].
    """
    p = random_prime(low, high, rng)
    q = random_prime(low, high, rng)
    while p == q:
        q = random_prime(low, high, rng)
    return p, q


def find_public_exponent(totient: int) -> int:
    """Finds the smallest public exponent >= 3 coprime with the totient.

    Args:
        totient: Euler's totient of the modulus.

    Returns:
        The public exponent. Falls back to 3 if no coprime value below `totient` exists.
    """
    for holder in range(3, totient):
        if arith.gcd(holder, totient) == 1:
            return holder
    warnings.warn(f"No public exponent coprime with {totient} found, falling back to 3.", RuntimeWarning)
    return 3


def generate_key_pair(p: int, q: int) -> KeyPair:
    """Generates an RSA key pair from two primes.

    The primes are validated again here regardless of any checks done by the caller.

    Args:
        p: The first prime.
        q: The second prime. Must differ from `p`.

    Returns:
        The derived key pair.

    Raises:
        NotPrimeError: If either value is not prime.
        DuplicatePrimesError: If both primes are equal.
        ModulusTooSmallError: If `p * q` <= 255.
    """
    for candidate in (p, q):
        if not check_prime(candidate):
            raise NotPrimeError(candidate)
    if p == q:
        raise DuplicatePrimesError(p)
    n = p * q
    if n <= MIN_MODULUS:
        raise ModulusTooSmallError(n)
    totient = (p - 1) * (q - 1)
    e = find_public_exponent(totient)
    d = arith.mod_inverse(e, totient)
    return KeyPair(n, e, d, p, q)
