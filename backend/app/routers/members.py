"""
Router de gestion des membres par les administrateurs.
GET    /api/members              : annuaire paginé
POST   /api/members/pre-register : pré-inscription
GET    /api/members/export       : export CSV
GET/PUT/DELETE /api/members/{id}
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import require_admin
from app.schemas.auth import MessageResponse
from app.schemas.member import (
    MemberDetailResponse,
    MemberListResponse,
    MemberResponse,
    MemberUpdate,
    PreRegisterCreate,
)
from app.services import member_service, registration_service
from app.services.errors import ConflictError, UnknownClassError
from app.services.session_service import AdminPrincipal

router = APIRouter(prefix="/api/members", tags=["Membres"])


@router.get("", response_model=MemberListResponse, summary="Lister les membres")
def list_members(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    search: Optional[str] = None,
    class_id: Optional[int] = Query(None, alias="classId"),
    principal: AdminPrincipal = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Annuaire paginé, du plus récent au plus ancien, filtrable par texte et par classe."""
    return member_service.list_members(db, page=page, limit=limit, search=search, class_id=class_id)


@router.post("/pre-register", response_model=MemberResponse, status_code=201, summary="Pré-inscrire un membre")
def pre_register(
    data: PreRegisterCreate,
    principal: AdminPrincipal = Depends(require_admin),
    db: Session = Depends(get_db),
):
    try:
        return registration_service.pre_register(db, data, principal.admin_id)
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.get("/export", summary="Exporter les membres en CSV")
def export_members(principal: AdminPrincipal = Depends(require_admin), db: Session = Depends(get_db)):
    csv_content = member_service.export_members_csv(db)
    return Response(
        content=csv_content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": "attachment; filename=members.csv"},
    )


@router.get("/{member_id}", response_model=MemberDetailResponse, summary="Détail d'un membre")
def get_member(member_id: int, principal: AdminPrincipal = Depends(require_admin), db: Session = Depends(get_db)):
    member = member_service.get_member(db, member_id)
    if member is None:
        raise HTTPException(status_code=404, detail="Not found")
    return member


@router.put("/{member_id}", response_model=MemberResponse, summary="Modifier un membre")
def update_member(
    member_id: int,
    data: MemberUpdate,
    principal: AdminPrincipal = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Met à jour les champs fournis ; `class_ids` remplace l'ensemble des classes du membre."""
    try:
        member = member_service.update_member(db, member_id, data, admin_id=principal.admin_id)
    except UnknownClassError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))
    if member is None:
        raise HTTPException(status_code=404, detail="Not found")
    return member


@router.delete("/{member_id}", response_model=MessageResponse, summary="Supprimer un membre")
def delete_member(member_id: int, principal: AdminPrincipal = Depends(require_admin), db: Session = Depends(get_db)):
    """Supprime définitivement un membre et ses inscriptions aux classes."""
    if not member_service.delete_member(db, member_id, principal.admin_id):
        raise HTTPException(status_code=404, detail="Not found")
    return {"message": "Deleted"}
