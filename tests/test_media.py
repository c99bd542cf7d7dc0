import base64

import pytest

from app.core.exceptions import ValidationError
from app.utils.media import (
    decode_image,
    encode_image,
    has_image,
    parse_data_uri,
    render_image,
    render_image_url,
)

PAYLOAD = bytes(range(256))


def test_encode_image_builds_data_uri():
    encoded = encode_image(b"abc", "image/jpeg")
    assert encoded == "data:image/jpeg;base64,YWJj"


@pytest.mark.parametrize("content_type", ["image/png", "image/svg+xml", "application/octet-stream"])
def test_encode_then_decode_returns_original_bytes(content_type):
    assert decode_image(encode_image(PAYLOAD, content_type)) == PAYLOAD


def test_decode_accepts_plain_base64():
    assert decode_image(base64.b64encode(PAYLOAD).decode()) == PAYLOAD


def test_parse_data_uri_reports_content_type():
    data, content_type = parse_data_uri("data:image/gif;base64,R0lG")
    assert content_type == "image/gif"
    assert data == base64.b64decode("R0lG")


def test_parse_data_uri_without_prefix_has_no_content_type():
    _, content_type = parse_data_uri("R0lG")
    assert content_type is None


def test_decode_ignores_line_breaks():
    text = base64.b64encode(PAYLOAD).decode()
    wrapped = "\n".join(text[i:i + 76] for i in range(0, len(text), 76))
    assert decode_image(wrapped) == PAYLOAD


def test_decode_rejects_invalid_base64():
    with pytest.raises(ValidationError):
        decode_image("data:image/png;base64,not base64!!")


@pytest.mark.parametrize("data, content_type", [(b"", "image/png"), (b"abc", ""), (None, "image/png"), (b"abc", None)])
def test_encode_requires_data_and_content_type(data, content_type):
    with pytest.raises(ValueError):
        encode_image(data, content_type)


def test_absent_image_renders_as_none():
    assert not has_image(None)
    assert not has_image({"data": b"abc"})
    assert render_image(None) is None
    assert render_image_url({"contentType": "image/png"}) is None


def test_render_image_full_shape():
    rendered = render_image({"data": b"abc", "contentType": "image/png", "filename": "a.png"})
    assert rendered == {
        "data": "YWJj",
        "contentType": "image/png",
        "filename": "a.png",
        "url": "data:image/png;base64,YWJj",
    }


def test_render_image_url_is_bare_string():
    assert render_image_url({"data": b"abc", "contentType": "image/png"}) == "data:image/png;base64,YWJj"
