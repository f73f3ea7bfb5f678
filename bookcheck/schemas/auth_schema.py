from pydantic import AliasChoices, BaseModel, EmailStr, Field


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class Token(BaseModel):
    access_token: str = Field(validation_alias=AliasChoices("accessToken", "access_token", "token"))
    token_type: str = "bearer"
