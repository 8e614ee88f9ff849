"""
Router des tables de référence (classes, superviseurs, rangs).
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import require_admin
from app.schemas.auth import MessageResponse
from app.schemas.lookup import (
    ClassCreate,
    ClassResponse,
    RankCreate,
    RankResponse,
    SupervisorCreate,
    SupervisorResponse,
)
from app.services import lookup_service
from app.services.errors import LookupInUseError

router = APIRouter(prefix="/api/lookups", tags=["Références"], dependencies=[Depends(require_admin)])


# --- Classes ---

@router.get("/classes", response_model=List[ClassResponse], summary="Lister les classes")
def list_classes(db: Session = Depends(get_db)):
    return lookup_service.get_classes(db)


@router.post("/classes", response_model=ClassResponse, status_code=201, summary="Créer une classe")
def create_class(data: ClassCreate, db: Session = Depends(get_db)):
    return lookup_service.create_class(db, data)


@router.delete("/classes/{class_id}", response_model=MessageResponse, summary="Supprimer une classe")
def delete_class(class_id: int, db: Session = Depends(get_db)):
    """Bloqué tant que des membres sont inscrits à la classe."""
    try:
        deleted = lookup_service.delete_class(db, class_id)
    except LookupInUseError as e:
        raise HTTPException(status_code=409, detail=str(e))
    if not deleted:
        raise HTTPException(status_code=404, detail="Not found")
    return {"message": "Deleted"}


# --- Superviseurs ---

@router.get("/supervisors", response_model=List[SupervisorResponse], summary="Lister les superviseurs")
def list_supervisors(db: Session = Depends(get_db)):
    return lookup_service.get_supervisors(db)


@router.post("/supervisors", response_model=SupervisorResponse, status_code=201, summary="Créer un superviseur")
def create_supervisor(data: SupervisorCreate, db: Session = Depends(get_db)):
    return lookup_service.create_supervisor(db, data)


@router.delete("/supervisors/{supervisor_id}", response_model=MessageResponse, summary="Supprimer un superviseur")
def delete_supervisor(supervisor_id: int, db: Session = Depends(get_db)):
    if not lookup_service.delete_supervisor(db, supervisor_id):
        raise HTTPException(status_code=404, detail="Not found")
    return {"message": "Deleted"}


# --- Rangs ---

@router.get("/ranks", response_model=List[RankResponse], summary="Lister les rangs")
def list_ranks(db: Session = Depends(get_db)):
    return lookup_service.get_ranks(db)


@router.post("/ranks", response_model=RankResponse, status_code=201, summary="Créer un rang")
def create_rank(data: RankCreate, db: Session = Depends(get_db)):
    return lookup_service.create_rank(db, data)


@router.delete("/ranks/{rank_id}", response_model=MessageResponse, summary="Supprimer un rang")
def delete_rank(rank_id: int, db: Session = Depends(get_db)):
    if not lookup_service.delete_rank(db, rank_id):
        raise HTTPException(status_code=404, detail="Not found")
    return {"message": "Deleted"}
