"""Pydantic request/response schemas for the admin authentication API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class LoginRequest(BaseModel):
    model_config = {
        "json_schema_extra": {"examples": [{"email": "admin@wilaya-store.dz", "password": "s3cret-pass"}]}
    }

    email: EmailStr
    password: str = Field(..., min_length=1)


class AdminResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str


class LoginResponse(BaseModel):
    message: str = "Login successful"
    admin: AdminResponse
