"""
Schémas Pydantic pour l'authentification (administrateurs et membres).
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, field_validator

from app.schemas.member import MemberResponse


def _ic_not_empty(v: str) -> str:
    if not v.strip():
        raise ValueError("Le numéro IC ne peut pas être vide.")
    return v.strip()


class AdminLogin(BaseModel):
    email: EmailStr
    password: str


class AdminResponse(BaseModel):
    id: int
    email: str
    name: str
    created_at: Optional[datetime]

    model_config = {"from_attributes": True}


class AdminLoginResponse(BaseModel):
    admin: AdminResponse


class OtpRequest(BaseModel):
    """Corps de requête pour demander un code OTP (POST /api/auth/otp/request)."""
    ic_number: str
    email: EmailStr

    @field_validator("ic_number")
    @classmethod
    def ic_not_empty(cls, v: str) -> str:
        return _ic_not_empty(v)


class OtpRequestResponse(BaseModel):
    message: str
    email: str


class OtpVerify(BaseModel):
    """Corps de requête pour vérifier un code OTP (POST /api/auth/otp/verify)."""
    ic_number: str
    email: EmailStr
    code: str

    @field_validator("ic_number")
    @classmethod
    def ic_not_empty(cls, v: str) -> str:
        return _ic_not_empty(v)

    @field_validator("code")
    @classmethod
    def code_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le code ne peut pas être vide.")
        return v.strip()


class MemberLoginResponse(BaseModel):
    member: MemberResponse


class MessageResponse(BaseModel):
    message: str
