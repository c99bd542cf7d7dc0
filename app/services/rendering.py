"""
Response shapes shared by the services.

Set endpoints return the full image object ``{data, contentType, filename, url}``.
Card, favorite and learning endpoints return images, including the image of
an embedded set, as a bare data URI string.
"""
from typing import Any, Dict, Optional

from app.utils.media import render_image, render_image_url
from app.utils.serialization import serialize_doc


def render_set(doc: Dict[str, Any]) -> Dict[str, Any]:
    rendered = serialize_doc(doc)
    rendered["image"] = render_image(doc.get("image"))
    return rendered


def render_set_inline(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if doc is None:
        return None
    rendered = serialize_doc(doc)
    rendered["image"] = render_image_url(doc.get("image"))
    return rendered


def render_card(doc: Dict[str, Any]) -> Dict[str, Any]:
    rendered = serialize_doc(doc)
    rendered["image"] = render_image_url(doc.get("image"))
    return rendered
