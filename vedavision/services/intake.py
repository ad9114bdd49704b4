"""
Image intake: what the browser posts (a FileReader / canvas data URL, or raw
base64) becomes one EncodedImage, or an InputValidationError.
"""
import base64
import binascii
import re

from vedavision.orchestrator.contracts import EncodedImage
from vedavision.orchestrator.errors import InputValidationError
from vedavision.services.settings import Settings

DEFAULT_MEDIA_TYPE = "image/jpeg"

_DATA_URL = re.compile(r"^data:([a-zA-Z0-9]+/[a-zA-Z0-9\-.+]+)?[^,]*,(.*)$", re.DOTALL)


def split_data_url(encoded: str) -> tuple[str, str]:
    """Return (payload, media_type). Raw base64 passes through with the default type."""
    m = _DATA_URL.match(encoded)
    if m is None:
        return encoded, DEFAULT_MEDIA_TYPE
    return m.group(2), m.group(1) or DEFAULT_MEDIA_TYPE


def validate_upload(media_type: str, size_bytes: int, settings: Settings):
    if media_type not in settings.supported_image_types:
        raise InputValidationError("Please upload a valid image (JPEG, PNG, WebP).")
    if size_bytes > settings.max_image_size_bytes:
        raise InputValidationError(f"Image size should be less than {settings.max_image_size_mb:g}MB.")


def encode_image(image_bytes: bytes, media_type: str = DEFAULT_MEDIA_TYPE) -> EncodedImage:
    return EncodedImage(media_type=media_type, data=base64.standard_b64encode(image_bytes).decode("ascii"))


def accept_image(encoded: str, settings: Settings) -> EncodedImage:
    payload, media_type = split_data_url(encoded.strip())
    if not payload:
        raise InputValidationError("No image data received.")
    try:
        raw = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InputValidationError("Image data is not valid base64.") from e
    validate_upload(media_type, len(raw), settings)
    return EncodedImage(media_type=media_type, data=payload)
