"""Bit-level diagnostics for packed IDs."""

from generation.layout import TIMESTAMP_BITS


def int_to_bit_string(num, width=64):
    """Render num as a two's-complement bit string, most significant bit first."""
    return format(num & ((1 << width) - 1), f"0{width}b")


def _segments(layout):
    """(name, width) pairs from the most significant bit of a 64-bit word down."""
    used = TIMESTAMP_BITS + layout.timestamp_shift
    return [
        ("reserved", 64 - used),
        ("timestamp", TIMESTAMP_BITS),
        ("data_center", layout.data_center_bits),
        ("worker", layout.worker_bits),
        ("sequence", layout.sequence_bits),
    ]


def describe_layout(layout):
    """One line per segment: name, bit range and width.

    The reserved segment always includes the sign bit.
    """
    lines = []
    high = 63
    for name, width in _segments(layout):
        if width == 0:
            continue
        low = high - width + 1
        lines.append(f"{name:<12} bits {high:>2}..{low:<2} ({width})")
        high = low - 1
    return "\n".join(lines)


def describe_id(value, layout):
    """Bit string of value split into its layout segments."""
    bits = int_to_bit_string(value)
    parts = []
    pos = 0
    for _, width in _segments(layout):
        if width:
            parts.append(bits[pos:pos + width])
            pos += width
    return " ".join(parts)
