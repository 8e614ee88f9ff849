"""
Schémas Pydantic pour les tables de référence (classes, superviseurs, rangs).
"""

from typing import Optional

from pydantic import BaseModel, field_validator


class _NamedCreate(BaseModel):
    name: str
    is_active: bool = True

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le nom ne peut pas être vide.")
        return v.strip()


class ClassCreate(_NamedCreate):
    location: Optional[str] = None


class SupervisorCreate(_NamedCreate):
    pass


class RankCreate(_NamedCreate):
    level: Optional[int] = None


class ClassResponse(BaseModel):
    id: int
    name: str
    location: Optional[str]
    is_active: bool

    model_config = {"from_attributes": True}


class SupervisorResponse(BaseModel):
    id: int
    name: str
    is_active: bool

    model_config = {"from_attributes": True}


class RankResponse(BaseModel):
    id: int
    name: str
    level: Optional[int]
    is_active: bool

    model_config = {"from_attributes": True}
