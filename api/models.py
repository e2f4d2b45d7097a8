"""
API models and schemas for the FastAPI application.
"""

import time
from datetime import datetime

from pydantic import BaseModel, Field, validator
from pydantic.types import PositiveInt

# Largest id a signed 64-bit integer can hold
MAX_BOOK_ID = 2 ** 63 - 1


def current_millis() -> int:
    """Current time as epoch milliseconds."""
    return int(time.time() * 1000)


class BookRequest(BaseModel):
    """Create/update payload for a book. The id comes from the store or the path."""
    title: str = Field(..., description="Book title")
    author: str = Field(..., description="Book author")
    category: str = Field(..., description="Book category")
    rating: int = Field(..., ge=1, le=5, description="Book rating (1-5)")

    @validator('title', 'author', 'category')
    def validate_not_blank(cls, v):
        """Reject empty and whitespace-only strings."""
        if not v.strip():
            raise ValueError('must not be blank')
        return v

    @validator('rating', pre=True)
    def validate_rating_not_bool(cls, v):
        """Reject JSON booleans, which would otherwise coerce to 0 or 1."""
        if isinstance(v, bool):
            raise ValueError('rating must be an integer')
        return v


class Book(BaseModel):
    """Book response model for API."""
    id: PositiveInt = Field(..., description="Unique book identifier")
    title: str = Field(..., description="Book title")
    author: str = Field(..., description="Book author")
    category: str = Field(..., description="Book category")
    rating: int = Field(..., ge=1, le=5, description="Book rating (1-5)")

    @classmethod
    def from_request(cls, book_id: int, request: BookRequest) -> "Book":
        """Build a book with the given id from a create/update payload."""
        return cls(id=book_id, **request.model_dump())


class ErrorResponse(BaseModel):
    """Error response model."""
    message: str = Field(..., description="Error message")
    status_code: int = Field(..., alias="statusCode", description="HTTP status code")
    timestamp: int = Field(default_factory=current_millis, description="Epoch milliseconds at error time")

    model_config = {
        "populate_by_name": True
    }


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str = Field(..., description="Service status")
    timestamp: datetime = Field(..., description="Current timestamp")
    version: str = Field(..., description="API version")
    book_count: int = Field(..., ge=0, description="Number of books in the store")
