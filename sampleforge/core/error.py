# SampleForge - PDF Image Sample Decoder
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Sample decoding errors.

Every failure a decode can report is a subclass of ImageDecodeError and
carries a short lowercase ``error_name`` in the style of PostScript error
names, so a driver iterating over many images can log and skip by name.
"""

from __future__ import annotations

# error names
IMAGEDECODEERROR = "imagedecodeerror"
INVALIDDIMENSION = "invaliddimension"
INVALIDBITDEPTH = "invalidbitdepth"
UNSUPPORTEDCOLORSPACE = "unsupportedcolorspace"
TRUNCATEDBUFFER = "truncatedbuffer"
ALLOCATIONFAILURE = "allocationfailure"


class ImageDecodeError(Exception):
    """Base class for all sample decoding failures."""

    error_name = IMAGEDECODEERROR


class InvalidDimension(ImageDecodeError, ValueError):
    error_name = INVALIDDIMENSION

    def __init__(self, width, height) -> None:
        self.width = width
        self.height = height
        super().__init__(
            f"Width and height must be greater than 0. {width}x{height} passed."
        )


class InvalidBitDepth(ImageDecodeError, ValueError):
    error_name = INVALIDBITDEPTH

    def __init__(self, bits_per_component, supported=(1, 2, 4, 8, 16)) -> None:
        self.bits_per_component = bits_per_component
        allowed = ", ".join(str(b) for b in supported)
        super().__init__(
            f"Bits per component must be one of {allowed}. "
            f"{bits_per_component} passed."
        )


class UnsupportedColorSpace(ImageDecodeError, ValueError):
    """Color space is not DeviceRGB, DeviceGray or DeviceCMYK (or an alias).

    Indexed and ICCBased spaces land here on purpose; callers are expected
    to skip the image.
    """

    error_name = UNSUPPORTEDCOLORSPACE

    def __init__(self, color_space) -> None:
        self.color_space = color_space
        super().__init__(f"Unsupported color space {color_space!r}")


class TruncatedBuffer(ImageDecodeError, ValueError):
    error_name = TRUNCATEDBUFFER

    def __init__(self, actual_length: int, expected_length: int) -> None:
        self.actual_length = actual_length
        self.expected_length = expected_length
        super().__init__(
            f"Sample data is {actual_length} bytes, "
            f"at least {expected_length} required"
        )


class AllocationFailure(ImageDecodeError, MemoryError):
    error_name = ALLOCATIONFAILURE

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        super().__init__(f"Couldn't create new {width}x{height} image")
