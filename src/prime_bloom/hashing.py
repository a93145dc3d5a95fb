from typing import Callable

from fixedint import Int32

# P is 53 so upper and lower case letters both fit below the base.
# M must be a large prime.
BASE = 53
MODULUS = 1_000_000_009

Hasher = Callable[[str], int]


def digit(c: int) -> int:
    # 'a' maps to 1; anything outside a-z is left as raw code arithmetic
    return c - ord("a") + 1


def polynomial_hash(key: str, base: int = BASE, modulus: int = MODULUS) -> int:
    """Polynomial rolling hash over the code points of ``key``.

    Always returns a value in ``[0, modulus)``.
    """
    hashcode = 0
    power = 1
    for c in key:
        hashcode = (hashcode + digit(ord(c)) * power) % modulus
        power = (power * base) % modulus
    return hashcode


def truncated_mod(x: int, m: int) -> int:
    """Remainder with the sign of the dividend, like C's ``%``."""
    r = abs(x) % m
    return r if x >= 0 else -r


def signed_char(b: int) -> int:
    return b - 256 if b > 127 else b


def int32_polynomial_hash(
    key: str, base: int = BASE, modulus: int = MODULUS
) -> int:
    """Same rolling hash, evaluated the way a 32-bit ``int`` evaluates it.

    The key is walked as UTF-8 ``char`` values (lone surrogates pass
    through), products and sums wrap at 32 bits and remainders truncate
    toward zero. A negative result is folded back into ``[0, modulus)``.
    """
    hashcode = Int32(0)
    power = Int32(1)
    for b in key.encode("utf-8", "surrogatepass"):
        term = Int32(digit(signed_char(b))) * power
        hashcode = Int32(truncated_mod(int(hashcode + term), modulus))
        power = Int32(truncated_mod(int(power * base), modulus))
    return int(hashcode) % modulus


HASHERS: dict[str, Hasher] = {
    "polynomial": polynomial_hash,
    "int32": int32_polynomial_hash,
}
