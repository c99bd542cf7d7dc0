"""
Request bodies for the create endpoints.

The mobile client sends sets and cards either as multipart forms (with an
optional ``image`` file part) or as JSON, so these endpoints read the body
themselves instead of declaring Form/File parameters.
"""
from typing import Any, Dict, Optional, Tuple, Type, TypeVar

import pydantic
from fastapi import Request
from starlette.datastructures import UploadFile

from app.core.exceptions import ValidationError
from app.models.flashcard import ImageUpload

FORM_CONTENT_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)


async def read_payload(request: Request) -> Tuple[Dict[str, Any], Optional[ImageUpload]]:
    """Return the plain fields of the body and the uploaded ``image`` file, if any."""
    content_type = request.headers.get("content-type", "")

    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        fields: Dict[str, Any] = {}
        upload = None
        for key, value in form.multi_items():
            if isinstance(value, UploadFile):
                if key == "image":
                    data = await value.read()
                    if data:
                        upload = ImageUpload(
                            data=data,
                            contentType=value.content_type or "application/octet-stream",
                            filename=value.filename,
                        )
            else:
                fields[key] = value
        return fields, upload

    try:
        body = await request.json()
    except ValueError as e:
        raise ValidationError("Request body must be JSON or multipart form data") from e
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body, None


def parse_model(model: Type[ModelT], fields: Dict[str, Any]) -> ModelT:
    try:
        return model(**fields)
    except pydantic.ValidationError as e:
        messages = [
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        ]
        raise ValidationError("; ".join(messages)) from e
