"""
Schémas Pydantic pour les membres.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, EmailStr, field_validator


class PreRegisterCreate(BaseModel):
    """Pré-inscription d'un membre par un administrateur (POST /api/members/pre-register)."""
    ic_number: str
    email: EmailStr
    name: Optional[str] = None

    @field_validator("ic_number")
    @classmethod
    def ic_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le numéro IC ne peut pas être vide.")
        return v.strip()


class MemberProfileUpdate(BaseModel):
    """
    Champs de profil modifiables par le membre lui-même (PUT /api/member/me).
    Les champs absents ne sont pas modifiés.
    """
    email: Optional[EmailStr] = None
    full_name: Optional[str] = None
    nickname: Optional[str] = None
    gender: Optional[str] = None
    dob: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    postcode: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    occupation: Optional[str] = None
    employer_name: Optional[str] = None
    employer_address: Optional[str] = None
    kin_name: Optional[str] = None
    kin_relation: Optional[str] = None
    kin_phone: Optional[str] = None
    has_silat_experience: Optional[bool] = None
    silat_experience_details: Optional[str] = None
    completed_cekak: Optional[bool] = None
    pdpa_consent_at: Optional[datetime] = None
    class_ids: Optional[List[int]] = None

    @field_validator("email", "has_silat_experience", "completed_cekak")
    @classmethod
    def not_null(cls, v):
        # Colonnes NOT NULL : null explicite refusé
        if v is None:
            raise ValueError("Ce champ ne peut pas être null.")
        return v


class MemberUpdate(MemberProfileUpdate):
    """
    Mise à jour d'un membre par un administrateur (PUT /api/members/{id}).
    `is_registered` n'y figure pas : seule la vérification OTP inscrit un membre.
    """
    ic_number: Optional[str] = None
    is_pre_registered: Optional[bool] = None

    @field_validator("ic_number")
    @classmethod
    def ic_not_empty(cls, v: Optional[str]) -> str:
        if v is None or not v.strip():
            raise ValueError("Le numéro IC ne peut pas être vide.")
        return v.strip()

    @field_validator("is_pre_registered")
    @classmethod
    def flag_not_null(cls, v):
        if v is None:
            raise ValueError("Ce champ ne peut pas être null.")
        return v


class MemberResponse(BaseModel):
    id: int
    ic_number: str
    email: str
    is_pre_registered: bool
    is_registered: bool
    full_name: Optional[str]
    nickname: Optional[str]
    gender: Optional[str]
    dob: Optional[str]
    phone: Optional[str]
    address: Optional[str]
    postcode: Optional[str]
    city: Optional[str]
    state: Optional[str]
    occupation: Optional[str]
    employer_name: Optional[str]
    employer_address: Optional[str]
    kin_name: Optional[str]
    kin_relation: Optional[str]
    kin_phone: Optional[str]
    has_silat_experience: bool
    silat_experience_details: Optional[str]
    completed_cekak: bool
    pdpa_consent_at: Optional[datetime]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    model_config = {"from_attributes": True}


class MemberDetailResponse(MemberResponse):
    """Membre enrichi des identifiants de ses classes."""
    classes: List[int]


class MemberListResponse(BaseModel):
    """Page de l'annuaire des membres (GET /api/members)."""
    data: List[MemberDetailResponse]
    total: int
    page: int
    total_pages: int
