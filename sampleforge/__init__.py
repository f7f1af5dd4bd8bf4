# SampleForge - PDF Image Sample Decoder
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
SampleForge - Public API

Decodes the raw samples of a PDF image XObject (after its stream filters
have been removed) into an RGB Pillow image.

**Usage:**
```python
import sampleforge

image = sampleforge.decode(data, width, height, 8, "DeviceRGB")
image.save("out.png")
```
"""

from .core.color_space import ColorModel, ColorSpaceEngine
from .core.decoder import ImageDescriptor, decode, decode_descriptor
from .core.error import (
    AllocationFailure,
    ImageDecodeError,
    InvalidBitDepth,
    InvalidDimension,
    TruncatedBuffer,
    UnsupportedColorSpace,
)
from .core.samples import SUPPORTED_BITS_PER_COMPONENT, component_value

__version__ = "0.1.0"

__all__ = [
    "AllocationFailure",
    "ColorModel",
    "ColorSpaceEngine",
    "ImageDecodeError",
    "ImageDescriptor",
    "InvalidBitDepth",
    "InvalidDimension",
    "SUPPORTED_BITS_PER_COMPONENT",
    "TruncatedBuffer",
    "UnsupportedColorSpace",
    "component_value",
    "decode",
    "decode_descriptor",
]
