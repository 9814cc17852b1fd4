import base64
import binascii
import io
import logging
import math
from typing import Iterable, Optional, Tuple

from PIL import Image, UnidentifiedImageError

from aicloset.core.taxonomy import color_rgb

logger = logging.getLogger(__name__)

SAMPLE_SIZE = (50, 50)
MIN_ALPHA = 128
MIN_SATURATION = 0.2
TOP_FRACTION = 0.3

RGB = Tuple[int, int, int]


def closest_palette_color(rgb: RGB) -> str:
    best, best_d = "Other", math.inf
    for name, ref in color_rgb().items():
        d = math.dist(rgb, ref)
        if d < best_d:
            best, best_d = name, d
    return best


def _saturation(r: int, g: int, b: int) -> float:
    hi, lo = max(r, g, b), min(r, g, b)
    return 0.0 if hi == 0 else (hi - lo) / hi


def _average(pixels: Iterable[RGB]) -> Optional[RGB]:
    pixels = list(pixels)
    if not pixels:
        return None
    n = len(pixels)
    return (
        round(sum(p[0] for p in pixels) / n),
        round(sum(p[1] for p in pixels) / n),
        round(sum(p[2] for p in pixels) / n),
    )


def dominant_color(img: Image.Image) -> Optional[str]:
    """Palette name of the most vibrant colour, or the mean colour for greyish images."""
    small = img.convert("RGBA").resize(SAMPLE_SIZE)
    opaque = [(r, g, b) for r, g, b, a in small.getdata() if a >= MIN_ALPHA]
    vivid = [p for p in opaque if _saturation(*p) > MIN_SATURATION]
    if vivid:
        vivid.sort(key=lambda p: _saturation(*p), reverse=True)
        top = max(1, int(len(vivid) * TOP_FRACTION))
        avg = _average(vivid[:top])
    else:
        avg = _average(opaque)
    if avg is None:
        return None
    color = closest_palette_color(avg)
    logger.debug("dominant color: RGB%s -> %s", avg, color)
    return color


def detect_dominant_color_b64(image_b64: str) -> Optional[str]:
    if "," in image_b64 and image_b64.startswith("data:"):
        image_b64 = image_b64.split(",", 1)[1]
    try:
        raw = base64.b64decode(image_b64, validate=False)
        with Image.open(io.BytesIO(raw)) as img:
            return dominant_color(img)
    except (binascii.Error, UnidentifiedImageError, OSError, ValueError) as e:
        logger.warning("color detection failed: %s", e)
        return None
