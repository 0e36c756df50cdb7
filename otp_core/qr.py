"""
qr.py — Render a provisioning URI as a QR code PNG data URL.

The QR encoding itself is done by the `qrcode` library (Pillow image
factory); this module only picks the options and packs the PNG as
"data:image/png;base64,...", ready for <img src="...">.
"""

import base64
import io
import logging

import qrcode
import qrcode.image.pil
from PIL import Image

from .errors import InvalidConfigError

logger = logging.getLogger(__name__)

ERROR_CORRECTION_LEVELS = {
    "L": qrcode.constants.ERROR_CORRECT_L,
    "M": qrcode.constants.ERROR_CORRECT_M,
    "Q": qrcode.constants.ERROR_CORRECT_Q,
    "H": qrcode.constants.ERROR_CORRECT_H,
}


def qr_code_png(uri: str, size: int = 200, margin: int = 4, error_correction: str = "M") -> bytes:
    """
    Encode `uri` as a QR code and return PNG bytes.

    Arguments:
        uri: usually the result of build_totp_uri()
        size: width/height of the image in pixels; the code is centred on a
              white square of this size. A size below one pixel per module
              returns the code at its natural size instead.
        margin: quiet zone around the code, in modules
        error_correction: "L", "M", "Q" or "H"
    """
    level = ERROR_CORRECTION_LEVELS.get(str(error_correction).upper())
    if level is None:
        raise InvalidConfigError(f"Unknown error correction level {error_correction!r}")
    if size < 1 or margin < 0:
        raise InvalidConfigError(f"Invalid QR size/margin: size={size}, margin={margin}")

    qr = qrcode.QRCode(version=None, error_correction=level, box_size=1, border=margin)
    qr.add_data(uri)
    qr.make(fit=True)
    # largest whole-pixel module size that fits; never scale below one pixel per module
    qr.box_size = max(1, size // (qr.modules_count + 2 * margin))

    img = qr.make_image(image_factory=qrcode.image.pil.PilImage,
                        fill_color="black", back_color="white")
    pil_img = img.get_image().convert("RGB")
    width = pil_img.size[0]
    if width < size:
        canvas = Image.new("RGB", (size, size), "white")
        offset = (size - width) // 2
        canvas.paste(pil_img, (offset, offset))
        pil_img = canvas

    buffer = io.BytesIO()
    pil_img.save(buffer, format="PNG")
    logger.debug("Rendered QR code: version=%s, box=%dpx, %dx%d px",
                 qr.version, qr.box_size, pil_img.size[0], pil_img.size[1])
    return buffer.getvalue()


def qr_code_data_url(uri: str, size: int = 200, margin: int = 4, error_correction: str = "M") -> str:
    """Same as qr_code_png(), as a base64 data URL."""
    png = qr_code_png(uri, size=size, margin=margin, error_correction=error_correction)
    return "data:image/png;base64," + base64.b64encode(png).decode("ascii")
