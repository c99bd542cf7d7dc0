"""
Image transport encoding.

Images are stored in MongoDB as ``{data: <bytes>, contentType, filename}``
sub-documents and cross the API boundary as ``data:<mime>;base64,<payload>``
strings, which the mobile client can use directly as an image source.
"""
import base64
import binascii
import re
from typing import Any, Dict, Optional, Tuple

from app.core.exceptions import ValidationError

DATA_URI_PREFIX = re.compile(r"^data:(?P<mime>[^;,]*)(?:;[^,]*)?;base64,", re.IGNORECASE)
WHITESPACE = re.compile(r"\s+")


def encode_image(data: bytes, content_type: str) -> str:
    """Encode binary image data as a data URI.

    Raises ValueError when either part is missing; callers check
    ``has_image`` first.
    """
    if not data or not content_type:
        raise ValueError("Image data and contentType are required")
    return f"data:{content_type};base64,{base64.b64encode(bytes(data)).decode('ascii')}"


def parse_data_uri(text: str) -> Tuple[bytes, Optional[str]]:
    """Decode a base64 string, with or without a ``data:...;base64,`` prefix.

    Returns the raw bytes and the MIME type named by the prefix (None when
    the string had no prefix).
    """
    content_type = None
    payload = text.strip()
    match = DATA_URI_PREFIX.match(payload)
    if match:
        content_type = match.group("mime") or None
        payload = payload[match.end():]
    payload = WHITESPACE.sub("", payload)

    try:
        return base64.b64decode(payload, validate=True), content_type
    except (binascii.Error, ValueError) as e:
        raise ValidationError("Image is not valid base64") from e


def decode_image(text: str) -> bytes:
    data, _ = parse_data_uri(text)
    return data


def has_image(image: Optional[Dict[str, Any]]) -> bool:
    return bool(image) and bool(image.get("data")) and bool(image.get("contentType"))


def render_image(image: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Full image shape: ``{data, contentType, filename, url}``, or None.

    ``data`` is the plain base64 payload, ``url`` the ready-to-use data URI.
    """
    if not has_image(image):
        return None
    return {
        "data": base64.b64encode(bytes(image["data"])).decode("ascii"),
        "contentType": image["contentType"],
        "filename": image.get("filename"),
        "url": encode_image(image["data"], image["contentType"]),
    }


def render_image_url(image: Optional[Dict[str, Any]]) -> Optional[str]:
    """Bare data URI, or None."""
    if not has_image(image):
        return None
    return encode_image(image["data"], image["contentType"])
