"""
Router libre-service du membre connecté (profil personnel).
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import clear_session_cookie, get_session_token, require_member
from app.schemas.auth import MessageResponse
from app.schemas.member import MemberDetailResponse, MemberProfileUpdate, MemberResponse
from app.services import member_service, session_service
from app.services.errors import ConflictError, UnknownClassError
from app.services.session_service import MemberPrincipal

router = APIRouter(prefix="/api/member", tags=["Profil membre"])


@router.get("/me", response_model=MemberDetailResponse, summary="Mon profil")
def get_me(principal: MemberPrincipal = Depends(require_member), db: Session = Depends(get_db)):
    member = member_service.get_member(db, principal.member_id)
    if member is None:
        raise HTTPException(status_code=401, detail="Not found")
    return member


@router.put("/me", response_model=MemberResponse, summary="Modifier mon profil")
def update_me(
    data: MemberProfileUpdate,
    principal: MemberPrincipal = Depends(require_member),
    db: Session = Depends(get_db),
):
    """Met à jour les champs fournis. L'IC et le statut d'inscription ne sont pas modifiables ici."""
    try:
        member = member_service.update_member(db, principal.member_id, data)
    except UnknownClassError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))
    if member is None:
        raise HTTPException(status_code=401, detail="Not found")
    return member


@router.post("/logout", response_model=MessageResponse, summary="Déconnexion membre")
def logout(
    response: Response,
    token: Optional[str] = Depends(get_session_token),
    db: Session = Depends(get_db),
):
    session_service.destroy(db, token)
    clear_session_cookie(response)
    return {"message": "Logged out"}
