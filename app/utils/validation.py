from typing import Optional

from app.core.exceptions import ValidationError


def require_text(value: Optional[str], field: str) -> str:
    """Return the stripped value, or raise ValidationError when it is blank."""
    if value is None or not str(value).strip():
        raise ValidationError(f"{field} is required")
    return str(value).strip()
