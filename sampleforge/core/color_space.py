# SampleForge - PDF Image Sample Decoder
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Device Color Spaces for Image Samples

Canonical color models for raw image samples, the alias table used to
normalize the color space names a document parser hands over, and the
device color conversions the decoders need.

Only the three device families are decodable. Indexed, ICCBased and the
other parameterized families (arrays with operands) are rejected.
"""

import enum
from typing import Tuple

from .error import UnsupportedColorSpace


class ColorModel(enum.Enum):
    """Canonical device color model of an image's samples."""

    RGB = "DeviceRGB"
    GRAYSCALE = "DeviceGray"
    CMYK = "DeviceCMYK"


class ColorSpaceEngine:
    """
    Color space name normalization and device color conversion.

    Conversions operate on components in the 0.0-1.0 range.
    """

    # Long and abbreviated (inline image) names
    ALIASES = {
        "DeviceRGB": ColorModel.RGB,
        "RGB": ColorModel.RGB,
        "DeviceGray": ColorModel.GRAYSCALE,
        "G": ColorModel.GRAYSCALE,
        "DeviceCMYK": ColorModel.CMYK,
        "CMYK": ColorModel.CMYK,
    }

    COMPONENT_COUNTS = {
        ColorModel.GRAYSCALE: 1,
        ColorModel.RGB: 3,
        ColorModel.CMYK: 4,
    }

    # Families we know about and refuse to approximate
    REJECTED_SPACES = {
        "Indexed", "I", "ICCBased", "Separation", "DeviceN",
        "CalGray", "CalRGB", "Lab", "Pattern",
    }

    @staticmethod
    def space_name(color_space) -> str:
        """
        Reduce a color space operand to its family name.

        Accepts ``str`` and ``bytes`` names with or without a leading ``/``,
        objects exposing the name through a ``val`` attribute, and arrays
        whose first element is the family name.

        Raises:
            UnsupportedColorSpace: If no name can be extracted.
        """
        name = color_space
        if isinstance(name, (list, tuple)):
            if not name:
                raise UnsupportedColorSpace(color_space)
            name = name[0]
        if hasattr(name, 'val'):
            name = name.val
        if isinstance(name, (bytes, bytearray)):
            name = bytes(name).decode('latin-1')
        if not isinstance(name, str):
            raise UnsupportedColorSpace(color_space)
        return name.strip().lstrip("/")

    @classmethod
    def normalize(cls, color_space) -> ColorModel:
        """
        Map a color space operand to its canonical ColorModel.

        Args:
            color_space: A ColorModel, a name such as ``"DeviceRGB"``,
                ``"/G"`` or ``b"CMYK"``, or a single-element array of one.

        Returns:
            The canonical ColorModel.

        Raises:
            UnsupportedColorSpace: For unknown names, for Indexed and
                ICCBased spaces, and for any array carrying operands.
        """
        if isinstance(color_space, ColorModel):
            return color_space

        name = cls.space_name(color_space)
        if name in cls.REJECTED_SPACES:
            raise UnsupportedColorSpace(color_space)

        # Device spaces take no operands: [/DeviceRGB] is fine, [/CalRGB <<...>>] is not
        if isinstance(color_space, (list, tuple)) and len(color_space) != 1:
            raise UnsupportedColorSpace(color_space)

        model = cls.ALIASES.get(name)
        if model is None:
            raise UnsupportedColorSpace(color_space)
        return model

    @classmethod
    def get_component_count(cls, color_space) -> int:
        """Number of components per pixel for a (normalizable) color space."""
        return cls.COMPONENT_COUNTS[cls.normalize(color_space)]

    @staticmethod
    def gray_to_rgb(gray: int) -> Tuple[int, int, int]:
        """
        Convert gray to RGB (all components equal).

        Formula: red = green = blue = gray
        """
        return (gray, gray, gray)

    @staticmethod
    def cmyk_to_rgb(cyan: float, magenta: float, yellow: float, black: float) -> Tuple[float, float, float]:
        """
        Convert CMYK to RGB.

        Args:
            cyan, magenta, yellow, black: CMYK components (0.0-1.0)

        Returns:
            Tuple of (red, green, blue) values (0.0-1.0)

        Algorithm:
        Each colorant is attenuated multiplicatively by the black component:
        red = (1 - cyan) * (1 - black), and likewise for green and blue.
        """
        red = (1 - cyan) * (1 - black)
        green = (1 - magenta) * (1 - black)
        blue = (1 - yellow) * (1 - black)

        return (red, green, blue)
