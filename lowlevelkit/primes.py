"""Prime factorisation of numbers given as decimal strings."""

from __future__ import annotations

_ULONG_MAX = 2**64 - 1


def _parse_ulong(s: str) -> int:
    """Parse ``s`` as an unsigned long the way ``strtoul`` does, rejecting trailing text."""
    text = s.lstrip(" \t\n\r\f\v")
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = len(text) - len(text.lstrip("0123456789"))
    if digits == 0:
        if s:
            raise ValueError(f"not a number: {s!r}")
        return 0
    if digits != len(text):
        raise ValueError(f"trailing characters in number: {s!r}")
    value = int(text)
    if value > _ULONG_MAX:
        return _ULONG_MAX
    return value if sign > 0 else (-value) & _ULONG_MAX


def prime_factors(s: str) -> list[int]:
    """Return the prime factors of the number in ``s``, smallest first.

    Raises ValueError if ``s`` is not entirely a number.
    """
    num = _parse_ulong(s)
    factors: list[int] = []
    divisor = 2
    while divisor * divisor <= num:
        while num % divisor == 0:
            factors.append(divisor)
            num //= divisor
        divisor += 1 if divisor == 2 else 2
    if num >= 2:
        factors.append(num)
    return factors