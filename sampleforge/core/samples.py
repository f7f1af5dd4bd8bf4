# SampleForge - PDF Image Sample Decoder
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Sample extraction and rescaling primitives.

Image samples are packed most significant bit first. Sub-byte components
(1, 2 and 4 bits) never straddle a byte, and every row of the image starts
on a byte boundary.
"""

SUPPORTED_BITS_PER_COMPONENT = (1, 2, 4, 8, 16)


def component_value(data, offset: int, bits_per_component: int) -> int:
    """Extract one component value from packed sample data.

    For 8 and 16 bit components ``offset`` is a byte offset. For 1, 2 and 4
    bit components it is a bit offset from the start of ``data``.

    Reads past either end of ``data`` yield 0 rather than raising; the
    caller's truncation guard decides where decoding stops.
    """
    data_length = len(data)

    if bits_per_component == 8:
        if 0 <= offset < data_length:
            return data[offset]
        return 0

    elif bits_per_component == 16:
        high = data[offset] if 0 <= offset < data_length else 0
        low = data[offset + 1] if 0 <= offset + 1 < data_length else 0
        return (high << 8) | low

    else:
        byte_idx = offset // 8
        bit_offset = offset % 8
        if not 0 <= byte_idx < data_length:
            return 0

        mask = (1 << bits_per_component) - 1
        return (data[byte_idx] >> (8 - bit_offset - bits_per_component)) & mask


def max_component_value(bits_per_component: int) -> int:
    return (1 << bits_per_component) - 1


def scale_to_byte(value: int, bits_per_component: int) -> int:
    """Rescale a component from its native range to 0-255, truncating.

    16-bit components keep only 8-bit fidelity (effectively the high byte).
    """
    if bits_per_component == 8:
        return value
    return value * 255 // max_component_value(bits_per_component)


def scale_to_unit(value: int, bits_per_component: int) -> float:
    """Rescale a component from its native range to 0.0-1.0."""
    return value / max_component_value(bits_per_component)
