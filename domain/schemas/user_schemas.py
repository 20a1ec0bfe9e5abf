from pydantic import BaseModel, EmailStr, Field, field_validator
from datetime import datetime
from uuid import UUID


class UserCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr

    @field_validator("name", mode="before")
    def strip_name(cls, v):
        # Strip before length checks so whitespace-only names are rejected
        if isinstance(v, str):
            return v.strip()
        return v


class UserResponse(BaseModel):
    user_id: UUID
    name: str
    email: str
    created_at: datetime

    model_config = {"from_attributes": True}
