"""torchchroma: color spaces and conversions for PyTorch."""

from torchchroma._capabilities import ColorSpace, Mix, Shade
from torchchroma._channel_range import (
    CHROMA,
    HUE,
    SIGNED_UNIT,
    UNIT,
    ChannelRange,
)
from torchchroma._clamp import clamp
from torchchroma._color import Color
from torchchroma._color_arithmetic import (
    color_add,
    color_divide,
    color_multiply,
    color_subtract,
)
from torchchroma._color_clamp import color_clamp, color_clamp_
from torchchroma._color_is_valid import color_is_valid
from torchchroma._color_lighten import color_lighten
from torchchroma._color_mix import color_mix
from torchchroma._conversion_error import ConversionError
from torchchroma._conversion_graph import (
    conversion_path,
    convert,
    register_conversion,
)
from torchchroma._hsl import Hsl, hsl
from torchchroma._hsl_to_rgb import hsl_to_rgb
from torchchroma._hsv import Hsv, hsv
from torchchroma._hsv_to_rgb import hsv_to_rgb
from torchchroma._lab import Lab, lab
from torchchroma._lab_to_lch import lab_to_lch
from torchchroma._lab_to_xyz import lab_to_xyz
from torchchroma._lch import Lch, lch
from torchchroma._lch_to_lab import lch_to_lab
from torchchroma._luma import Luma, luma
from torchchroma._luma_to_xyz import luma_to_xyz
from torchchroma._rgb import Rgb, linear_rgb, srgb
from torchchroma._rgb_to_hsl import rgb_to_hsl
from torchchroma._rgb_to_hsv import rgb_to_hsv
from torchchroma._rgb_to_xyz import RGB_TO_XYZ, rgb_to_xyz
from torchchroma._srgb_linear_to_srgb import srgb_linear_to_srgb
from torchchroma._srgb_to_srgb_linear import srgb_to_srgb_linear
from torchchroma._tristimulus import X_N, Y_N, Z_N
from torchchroma._xyz import Xyz, xyz
from torchchroma._xyz_to_lab import xyz_to_lab
from torchchroma._xyz_to_luma import xyz_to_luma
from torchchroma._xyz_to_rgb import XYZ_TO_RGB, xyz_to_rgb

__all__ = [
    # Capabilities
    "ColorSpace",
    "Mix",
    "Shade",
    # Channel ranges
    "ChannelRange",
    "CHROMA",
    "HUE",
    "SIGNED_UNIT",
    "UNIT",
    "clamp",
    # Color spaces
    "Color",
    "Hsl",
    "Hsv",
    "Lab",
    "Lch",
    "Luma",
    "Rgb",
    "Xyz",
    "hsl",
    "hsv",
    "lab",
    "lch",
    "linear_rgb",
    "luma",
    "srgb",
    "xyz",
    # Operations
    "color_add",
    "color_clamp",
    "color_clamp_",
    "color_divide",
    "color_is_valid",
    "color_lighten",
    "color_mix",
    "color_multiply",
    "color_subtract",
    # Conversion graph
    "ConversionError",
    "conversion_path",
    "convert",
    "register_conversion",
    # Conversion edges
    "hsl_to_rgb",
    "hsv_to_rgb",
    "lab_to_lch",
    "lab_to_xyz",
    "lch_to_lab",
    "luma_to_xyz",
    "rgb_to_hsl",
    "rgb_to_hsv",
    "rgb_to_xyz",
    "xyz_to_lab",
    "xyz_to_luma",
    "xyz_to_rgb",
    # Transfer functions
    "srgb_linear_to_srgb",
    "srgb_to_srgb_linear",
    # Constants
    "RGB_TO_XYZ",
    "XYZ_TO_RGB",
    "X_N",
    "Y_N",
    "Z_N",
]

__version__ = "0.1.0"
