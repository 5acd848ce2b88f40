"""Textbook RSA for printable ASCII text, in an Academic Sense.

Provides toy-sized RSA key generation from two primes, per-character encryption and decryption of printable ASCII,
and the integer arithmetic underneath (primality, gcd, modular exponentiation and inverse). Not secure, by intent.

Typical usage example:

    p, q = generate_primes()
    pk = RSAPrivKey.generate(p, q)
    c = pk.pub.encrypt("Hi there!")
    r = pk.decrypt(c)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from asciirsa.arith import gcd
from asciirsa.arith import mod_inverse
from asciirsa.arith import mod_pow
from asciirsa.errors import DuplicatePrimesError
from asciirsa.errors import MalformedCiphertextError
from asciirsa.errors import ModulusTooSmallError
from asciirsa.errors import NotPrimeError
from asciirsa.errors import RSAError
from asciirsa.errors import UndefinedInverseError
from asciirsa.errors import UnsupportedCharacterError
from asciirsa.keygen import check_prime
from asciirsa.keygen import generate_key_pair
from asciirsa.keygen import generate_primes
from asciirsa.keygen import KeyPair
from asciirsa.keygen import random_prime
from asciirsa.rsa import format_ciphertext
from asciirsa.rsa import parse_ciphertext
from asciirsa.rsa import RSAPrivKey
from asciirsa.rsa import RSAPubKey

__version__ = "0.1.0"
__all__ = [
    "RSAPrivKey",
    "RSAPubKey",
    "KeyPair",
    "check_prime",
    "random_prime",
    "generate_primes",
    "generate_key_pair",
    "gcd",
    "mod_pow",
    "mod_inverse",
    "format_ciphertext",
    "parse_ciphertext",
    "RSAError",
    "NotPrimeError",
    "DuplicatePrimesError",
    "ModulusTooSmallError",
    "UnsupportedCharacterError",
    "MalformedCiphertextError",
    "UndefinedInverseError",
]
