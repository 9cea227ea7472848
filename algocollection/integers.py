"""Integer utilities: digit reversal, binary form, powers of two, Fibonacci."""

from collections.abc import Iterator

__all__ = [
    "reverse_digits",
    "is_palindrome_number",
    "decimal_to_binary",
    "is_power_of_two",
    "fibonacci",
]


def reverse_digits(n: int) -> int:
    """Return *n* with its decimal digits reversed, keeping its sign."""
    sign = -1 if n < 0 else 1
    return sign * int(str(abs(n))[::-1])


def is_palindrome_number(n: int) -> bool:
    """Tell whether *n* reads the same with its digits reversed."""
    return n == reverse_digits(n)


def decimal_to_binary(n: int) -> str:
    """Return the binary digits of *n*; an empty string when *n* is not positive."""
    bits = []
    while n > 0:
        n, bit = divmod(n, 2)
        bits.append(str(bit))
    return "".join(reversed(bits))


def is_power_of_two(n: int) -> bool:
    """Tell whether *n* is a power of two."""
    return n != 0 and (n & (n - 1)) == 0


def fibonacci(count: int) -> Iterator[int]:
    """Yield the first *count* Fibonacci numbers, starting from 0."""
    current, following = 0, 1
    for _ in range(count):
        yield current
        current, following = following, current + following