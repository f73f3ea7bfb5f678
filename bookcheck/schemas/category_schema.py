from pydantic import BaseModel, Field, field_validator


class CategoryCreate(BaseModel):
    title: str = Field(..., min_length=1)

    @field_validator("title")
    @classmethod
    def not_blank(cls, v):
        if not v or not v.strip():
            raise ValueError("title must not be empty")
        return v


class CategoryUpdate(CategoryCreate):
    pass


class CategoryOut(BaseModel):
    id: str = Field(alias="_id")
    title: str

    model_config = {"populate_by_name": True, "from_attributes": True}
