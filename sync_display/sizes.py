"""
Byte-size formatting for Sync Display.
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Tuple

from sync_display.constants import SIZE_SCALES, SIZE_SUFFIXES, SIZE_TIER_FACTOR
from sync_display.models import DEFAULT_STRINGS, DisplayStrings


def _scale_to_tier(size: int) -> Tuple[Decimal, int]:
    """Divide a byte count down to its suffix tier.

    Sizes that fit a float are divided as floats; larger ones are divided
    exactly in Decimal.
    """
    tier = 0
    try:
        result = float(size)
    except OverflowError:
        value = Decimal(size)
        with localcontext() as ctx:
            # Every 3 bits need at most one digit; each division by 1024
            # adds at most 10 fractional digits
            ctx.prec = size.bit_length() // 3 + 1 + 10 * len(SIZE_SUFFIXES)
            while value >= SIZE_TIER_FACTOR and tier < len(SIZE_SUFFIXES) - 1:
                value /= SIZE_TIER_FACTOR
                tier += 1
        return value, tier

    while result >= SIZE_TIER_FACTOR and tier < len(SIZE_SUFFIXES) - 1:
        result /= SIZE_TIER_FACTOR
        tier += 1
    return Decimal(result), tier


def bytes_to_human_readable(size: int, strings: DisplayStrings = DEFAULT_STRINGS) -> str:
    """Convert a file size in bytes to human-readable output.

    The value is scaled to the largest suffix tier it fills, rounded
    half-up to the decimal places of that tier (0, 1 or 2) and stripped
    of trailing zeros. Sizes beyond the last tier stay in YB.

    Args:
        size: File size in bytes. Negative means unknown.
        strings: Localized markers; ``strings.pending`` is returned for
            negative sizes.

    Returns:
        Human-readable string (e.g., "12 MB")

    Examples:
        >>> bytes_to_human_readable(1536)
        '2 KB'
        >>> bytes_to_human_readable(1572864)
        '1.5 MB'
        >>> bytes_to_human_readable(1048576)
        '1 MB'
    """
    if size < 0:
        return strings.pending

    value, tier = _scale_to_tier(size)
    scale = SIZE_SCALES[tier]
    quantum = Decimal(1).scaleb(-scale)

    with localcontext() as ctx:
        # Enough digits for the whole integer part plus the tier's decimals
        ctx.prec = max(ctx.prec, value.adjusted() + scale + 2)
        readable = value.quantize(quantum, rounding=ROUND_HALF_UP).normalize()

        # normalize() turns 100 into 1E+2
        if readable.as_tuple().exponent > 0:
            readable = readable.quantize(Decimal(1))

    return f'{readable} {SIZE_SUFFIXES[tier]}'
