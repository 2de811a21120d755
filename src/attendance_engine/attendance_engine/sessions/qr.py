from __future__ import annotations

import io

import qrcode

from .model import Session


def render_qr_png(session: Session, *, box_size: int = 10, border: int = 2) -> bytes:
    """PNG image of a QR code carrying the session value."""
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=box_size,
        border=border,
    )
    qr.add_data(session.value)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
