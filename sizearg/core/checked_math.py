from __future__ import annotations

SUPPORTED_WORD_BITS = (8, 16, 32, 64, 128)


def word_max(bits: int) -> int:
    if bits not in SUPPORTED_WORD_BITS:
        raise ValueError(f"Unsupported word size: {bits}")
    return (1 << bits) - 1


USIZE_MAX = word_max(64)


def checked_mul(left: int, right: int, max_value: int = USIZE_MAX) -> int | None:
    """Multiply two unsigned values, returning None if the product exceeds max_value."""
    if left < 0 or right < 0:
        raise ValueError("checked_mul operands must be non-negative")
    product = left * right
    if product > max_value:
        return None
    return product


def checked_pow(base: int, power: int, max_value: int = USIZE_MAX) -> int | None:
    """Raise base to power by square-and-multiply.

    Every intermediate product goes through checked_mul, so the first overflow
    aborts the whole computation. A power of zero yields 1 for any base.
    """
    if base < 0 or power < 0:
        raise ValueError("checked_pow operands must be non-negative")

    acc = 1
    while power > 1:
        if power & 1:
            acc = checked_mul(acc, base, max_value)
            if acc is None:
                return None
        power //= 2
        base = checked_mul(base, base, max_value)
        if base is None:
            return None

    if power == 1:
        return checked_mul(acc, base, max_value)
    return acc
