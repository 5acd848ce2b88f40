"""Integer arithmetic underlying the RSA core.

Pure functions only: greatest common divisor, square-and-multiply modular exponentiation and the modular inverse via
the Extended Euclidean Algorithm. Python integers never overflow, so products are reduced only to keep them small.

Typical usage example:

    gcd(7, 3120)
    mod_pow(65, 7, 3233)
    mod_inverse(7, 3120)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from asciirsa.errors import UndefinedInverseError


def gcd(a: int, b: int) -> int:
    """Computes the greatest common divisor with the iterative Euclidean algorithm.

    Args:
        a: The first integer.
        b: The second integer.

    Returns:
        The non-negative greatest common divisor. If one operand is zero, the other one.
    """
    while b != 0:
        a, b = b, a % b
    return abs(a)


def eea(a: int, b: int) -> tuple[int, int, int]:
    """Implements the Extended Euclidean Algorithm.

    Such that a*s0 + b*t0 = r0 = gcd(a, b).

    Args:
        a: The first natural number.
        b: The second natural number.

    Returns:
        Greatest common divisor of two integers.
        As well as the Bezout coefficients.
    """
    r0, r1 = a, b
    s0, s1, t0, t1 = 1, 0, 0, 1
    while r1 != 0:
        q = r0 // r1
        r0, r1 = r1, r0 - q * r1
        s0, s1 = s1, s0 - q * s1
        t0, t1 = t1, t0 - q * t1
    return r0, s0, t0


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Computes `base**exponent % modulus` by binary square-and-multiply.

    Args:
        base: The base, any integer.
        exponent: The exponent. Must be >= 0.
        modulus: The modulus. Must be >= 1.

    Returns:
        The result, in range [0, modulus).

    Raises:
        ValueError: If the exponent is negative or the modulus is smaller than 1.
    """
    if modulus < 1:
        raise ValueError("modulus must be >= 1")
    if exponent < 0:
        raise ValueError("exponent must be >= 0")
    result = 1 % modulus
    base %= modulus
    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        base = (base * base) % modulus
        exponent >>= 1
    return result


def mod_inverse(e: int, phi: int) -> int:
    """Calculates the modular multiplicative inverse of `e` modulo `phi`.

    Runs the Extended Euclidean Algorithm tracking only the coefficient of `e`, swapping the operands each round.

    Args:
        e: The value to invert, usually the public exponent.
        phi: The modulus, usually the totient. Must be >= 1.

    Returns:
        `d` in range [0, phi) such that `e * d % phi == 1 % phi`.

    Raises:
        UndefinedInverseError: If `e` and `phi` are not coprime or `phi` < 1.
    """
    if phi < 1 or gcd(e, phi) != 1:
        raise UndefinedInverseError(e, phi)
    modulus = phi
    e %= phi
    a, b = 0, 1
    while e > 1:
        quotient = e // phi
        phi, e = e % phi, phi
        a, b = b - quotient * a, a
    return b % modulus
