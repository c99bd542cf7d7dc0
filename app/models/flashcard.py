from pydantic import BaseModel
from typing import Optional


class ImageUpload(BaseModel):
    """An uploaded image held in memory for the duration of a request."""
    data: bytes
    contentType: str
    filename: Optional[str] = None


class SetCreate(BaseModel):
    title: str
    description: str
    private: bool = True
    creator: str = "anonymous"


class CardCreate(BaseModel):
    set: str
    question: str
    answer: str
    # base64 string, with or without a data: prefix
    image: Optional[str] = None


class UserSetCreate(BaseModel):
    user: str
    set: str


class LearningCreate(BaseModel):
    user: str
    set: str
    cardsTotal: int
    correct: int
    wrong: int
