from typing import Any, Dict, Optional

from bson import ObjectId


def serialize_doc(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Make a MongoDB document JSON friendly.

    ``_id`` becomes a string ``id`` and any ObjectId reference becomes a
    string. Nested image sub-documents are left alone; they are rendered by
    ``app.utils.media``.
    """
    if doc is None:
        return None

    result: Dict[str, Any] = {}
    if "_id" in doc:
        result["id"] = str(doc["_id"])
    for key, value in doc.items():
        if key == "_id":
            continue
        result[key] = str(value) if isinstance(value, ObjectId) else value
    return result
