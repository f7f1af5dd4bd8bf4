# SampleForge - PDF Image Sample Decoder
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Cairo Image Output Module

Hands decoded bitmaps to Cairo-based consumers. Converts the RGB bitmap
produced by the decoder into a Cairo RGB24 image surface, padding each
row to the stride Cairo requires.
"""

import sys

import numpy as np

import cairo

# Byte offsets of (red, green, blue, unused) within one native-endian
# RGB24 word
RGB24_BYTE_OFFSETS = {
    "little": (2, 1, 0, 3),
    "big": (1, 2, 3, 0),
}


def bitmap_to_array(image):
    """Return the bitmap's pixels as a (height, width, 3) uint8 array."""
    if image.mode != "RGB":
        image = image.convert("RGB")
    return np.asarray(image, dtype=np.uint8)


def _pack_rgb24(rgb, stride, byteorder=sys.byteorder):
    """Pack a (height, width, 3) array into stride-padded RGB24 rows.

    Little-endian hosts get B, G, R, X bytes per pixel; big-endian hosts
    get X, R, G, B.
    """
    height, width = rgb.shape[:2]
    red, green, blue, unused = RGB24_BYTE_OFFSETS[byteorder]

    packed = np.zeros((height, stride), dtype=np.uint8)
    row_pixels = packed[:, :width * 4].reshape(height, width, 4)
    row_pixels[..., red] = rgb[..., 0]
    row_pixels[..., green] = rgb[..., 1]
    row_pixels[..., blue] = rgb[..., 2]
    row_pixels[..., unused] = 255
    return packed


def bitmap_to_surface(image):
    """Convert an RGB bitmap to a Cairo FORMAT_RGB24 image surface.

    Cairo RGB24 is a native-endian 32-bit word per pixel, so the byte
    order follows the host. Rows are padded to
    ``cairo.ImageSurface.format_stride_for_width``.
    """
    rgb = bitmap_to_array(image)
    height, width = rgb.shape[:2]

    stride = cairo.ImageSurface.format_stride_for_width(cairo.FORMAT_RGB24, width)
    packed = _pack_rgb24(rgb, stride)

    # Cairo keeps a reference to the buffer for the surface's lifetime
    pixel_data = bytearray(packed.tobytes())
    return cairo.ImageSurface.create_for_data(
        pixel_data, cairo.FORMAT_RGB24, width, height, stride
    )
