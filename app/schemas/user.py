import re

from pydantic import BaseModel, EmailStr, Field, field_validator

PASSWORD_STRENGTH = re.compile(r"(?=.*[a-z])(?=.*[A-Z])(?=.*[0-9])(?=.*[!@#$%^&*])")
PASSWORD_TOO_WEAK = (
    "Password too weak. Password must contain at least one uppercase letter, "
    "one lowercase letter, one number, and one special character."
)

class UserCreate(BaseModel):
    name: str = Field(..., min_length=3)
    email: EmailStr
    phone: str = Field(..., min_length=1)
    # kept exactly as typed; login compares against the same raw value
    password: str = Field(..., min_length=6)

    @field_validator("name", "email", "phone", mode="before")
    @classmethod
    def strip_whitespace(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("password")
    @classmethod
    def password_must_be_strong(cls, v):
        if not PASSWORD_STRENGTH.match(v):
            raise ValueError(PASSWORD_TOO_WEAK)
        return v

class UserLogin(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)

class UserUpdate(BaseModel):
    name: str = Field(..., min_length=3)
    email: EmailStr
    phone: str = Field(..., min_length=1)

    model_config = {
        "str_strip_whitespace": True
    }

class UserOut(BaseModel):
    id: int
    name: str
    email: str
    phone: str

    model_config = {
        "from_attributes": True
    }

class LogoutOut(BaseModel):
    message: str
