from typing import Optional

from pydantic import BaseModel, Field

class TaskCreate(BaseModel):
    # the owner always comes from the token; unknown keys such as userId are dropped
    title: str = Field(..., min_length=3)
    description: Optional[str] = None

    model_config = {
        "str_strip_whitespace": True
    }

class TaskUpdate(BaseModel):
    title: str = Field(..., min_length=3)
    description: Optional[str] = None

    model_config = {
        "str_strip_whitespace": True
    }

class TaskOut(BaseModel):
    id: int
    title: str

    model_config = {
        "from_attributes": True
    }
