# SampleForge - PDF Image Sample Decoder
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Image Sample Decoder

Rebuilds an RGB bitmap from the raw sample data of an image XObject whose
stream filters have already been removed. Handles DeviceRGB, DeviceGray
and DeviceCMYK samples at 1, 2, 4, 8 or 16 bits per component.

All three color models share one row-major walk; a ChannelLayout supplies
what differs between them (component count, rescaling, conversion to RGB).

Truncation is handled at two levels:
- a buffer shorter than the aggregate sample length is rejected outright
  with TruncatedBuffer;
- a buffer that passes that check but runs out mid-scan (rows are padded
  to byte boundaries) stops the walk and returns the partially filled
  bitmap, leaving unreached pixels blank.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple, Union

from PIL import Image

from .color_space import ColorModel, ColorSpaceEngine
from .error import AllocationFailure, InvalidBitDepth, InvalidDimension, TruncatedBuffer
from .samples import (
    SUPPORTED_BITS_PER_COMPONENT,
    component_value,
    scale_to_byte,
    scale_to_unit,
)

logger = logging.getLogger(__name__)

# Value of pixels the walk never reaches
BLANK_PIXEL = (0, 0, 0)


@dataclass(frozen=True)
class ImageDescriptor:
    """Geometry and sample format of one image.

    ``color_space`` may be given in any form ColorSpaceEngine.normalize
    accepts; it is stored as the canonical ColorModel. Validation runs
    dimensions first, then bit depth, then color space.
    """

    width: int
    height: int
    bits_per_component: int
    color_space: ColorModel

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidDimension(self.width, self.height)

        bpc = self.bits_per_component
        if (not isinstance(bpc, int) or isinstance(bpc, bool)
                or bpc not in SUPPORTED_BITS_PER_COMPONENT):
            raise InvalidBitDepth(self.bits_per_component, SUPPORTED_BITS_PER_COMPONENT)

        object.__setattr__(self, "color_space", ColorSpaceEngine.normalize(self.color_space))

    @property
    def components(self) -> int:
        return ColorSpaceEngine.COMPONENT_COUNTS[self.color_space]

    @property
    def bytes_per_component(self) -> float:
        return self.bits_per_component / 8

    @property
    def bits_per_pixel(self) -> int:
        return self.components * self.bits_per_component

    @property
    def expected_length(self) -> int:
        """Aggregate sample length in bytes, ignoring row padding."""
        return (self.width * self.height * self.bits_per_pixel + 7) // 8

    @property
    def row_stride(self) -> int:
        """Bytes per row, padded to a byte boundary."""
        return (self.width * self.bits_per_pixel + 7) // 8


def _cmyk_pixel(cyan: float, magenta: float, yellow: float, black: float) -> Tuple[int, int, int]:
    red, green, blue = ColorSpaceEngine.cmyk_to_rgb(cyan, magenta, yellow, black)
    return (int(red * 255), int(green * 255), int(blue * 255))


@dataclass(frozen=True)
class ChannelLayout:
    """What the shared walk needs to know about one color model."""

    components: int
    rescale: Callable[[int, int], Union[int, float]]
    convert: Optional[Callable[..., Tuple[int, int, int]]] = None

    def pixel(self, values, bits_per_component: int) -> Tuple[int, ...]:
        """Turn one pixel's raw component values into an RGB triple."""
        channels = [self.rescale(value, bits_per_component) for value in values]
        if self.convert is None:
            return tuple(channels)
        return self.convert(*channels)


LAYOUTS = {
    ColorModel.RGB: ChannelLayout(3, scale_to_byte),
    ColorModel.GRAYSCALE: ChannelLayout(1, scale_to_byte, ColorSpaceEngine.gray_to_rgb),
    ColorModel.CMYK: ChannelLayout(4, scale_to_unit, _cmyk_pixel),
}


def decode(buffer, width: int, height: int, bits_per_component: int, color_space) -> Image.Image:
    """
    Create an RGB image from raw image XObject sample data.

    Args:
        buffer: Sample bytes, already stripped of stream filters.
        width: Image width in pixels.
        height: Image height in pixels.
        bits_per_component: 1, 2, 4, 8 or 16.
        color_space: Color space name, e.g. 'DeviceRGB', 'G' or 'CMYK'.

    Returns:
        A Pillow image in mode "RGB". It may be partially filled when the
        data runs out mid-scan.

    Raises:
        InvalidDimension: width or height is not positive.
        InvalidBitDepth: bits_per_component is not supported.
        UnsupportedColorSpace: color_space is not a device RGB, gray or
            CMYK space (Indexed and ICCBased included).
        TruncatedBuffer: buffer is shorter than the aggregate sample length.
        AllocationFailure: the output image could not be created.
    """
    descriptor = ImageDescriptor(width, height, bits_per_component, color_space)
    return decode_descriptor(buffer, descriptor)


def decode_descriptor(buffer, descriptor: ImageDescriptor) -> Image.Image:
    """Decode ``buffer`` according to an already validated descriptor."""
    if not isinstance(buffer, (bytes, bytearray)):
        buffer = bytes(buffer)

    logger.debug(
        "Decoding %dx%d %s image, %d bits per component, %d bytes",
        descriptor.width, descriptor.height, descriptor.color_space.value,
        descriptor.bits_per_component, len(buffer),
    )

    image = _allocate_bitmap(descriptor.width, descriptor.height)
    layout = LAYOUTS[descriptor.color_space]

    if len(buffer) < descriptor.expected_length:
        logger.warning(
            "Rejecting %dx%d %s image: %d bytes of sample data, %d expected",
            descriptor.width, descriptor.height, descriptor.color_space.value,
            len(buffer), descriptor.expected_length,
        )
        raise TruncatedBuffer(len(buffer), descriptor.expected_length)

    return _walk_samples(image, buffer, descriptor, layout)


def _allocate_bitmap(width: int, height: int) -> Image.Image:
    try:
        return Image.new("RGB", (width, height), BLANK_PIXEL)
    except (MemoryError, OverflowError, ValueError) as exc:
        raise AllocationFailure(width, height) from exc


def _walk_samples(image, data, descriptor, layout):
    """Fill ``image`` row-major from ``data``, stopping where the data ends."""
    width = descriptor.width
    height = descriptor.height
    bpc = descriptor.bits_per_component
    ncomp = layout.components
    bits_per_pixel = ncomp * bpc
    row_bits = descriptor.row_stride * 8
    data_bits = len(data) * 8

    pixels = image.load()

    for y in range(height):
        bit_pos = y * row_bits
        for x in range(width):
            if bit_pos + bits_per_pixel > data_bits:
                logger.warning(
                    "Sample data ran out at pixel (%d, %d); %d of %d pixels decoded",
                    x, y, y * width + x, width * height,
                )
                return image

            if bpc == 8:
                # Fast path: one byte per component, no masking
                offset = bit_pos >> 3
                values = data[offset:offset + ncomp]
            elif bpc == 16:
                offset = bit_pos >> 3
                values = [component_value(data, offset + 2 * i, 16) for i in range(ncomp)]
            else:
                values = [component_value(data, bit_pos + i * bpc, bpc) for i in range(ncomp)]

            pixels[x, y] = layout.pixel(values, bpc)
            bit_pos += bits_per_pixel

    return image
