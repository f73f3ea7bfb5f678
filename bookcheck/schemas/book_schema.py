from pydantic import BaseModel, Field, field_validator

from bookcheck.schemas.category_schema import CategoryOut


class BookBase(BaseModel):
    title: str = Field(..., min_length=1)
    author: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    pages: int = Field(..., gt=0)

    @field_validator("title", "author")
    @classmethod
    def not_blank(cls, v):
        if not v or not v.strip():
            raise ValueError("must not be empty")
        return v


class BookCreate(BookBase):
    category: str = Field(..., min_length=1)


class BookUpdate(BaseModel):
    title: str | None = None
    author: str | None = None
    description: str | None = None
    price: float | None = Field(default=None, ge=0)
    pages: int | None = Field(default=None, gt=0)
    category: str | None = None


class BookOut(BookBase):
    id: str = Field(alias="_id")
    category: CategoryOut | None

    model_config = {"populate_by_name": True}


class MessageResponse(BaseModel):
    message: str
