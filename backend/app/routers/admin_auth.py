"""
Router d'authentification des administrateurs (session serveur par cookie).
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import clear_session_cookie, get_session_token, require_admin, set_session_cookie
from app.schemas.auth import AdminLogin, AdminLoginResponse, AdminResponse, MessageResponse
from app.services import admin_service, session_service
from app.services.session_service import AdminPrincipal

router = APIRouter(prefix="/api/admin", tags=["Administrateurs"])


@router.post("/login", response_model=AdminLoginResponse, summary="Connexion administrateur")
def login(
    data: AdminLogin,
    response: Response,
    token: Optional[str] = Depends(get_session_token),
    db: Session = Depends(get_db),
):
    """
    Vérifie l'email et le mot de passe puis ouvre une session administrateur.
    Toute session déjà portée par le cookie est détruite auparavant.
    """
    admin = admin_service.authenticate(db, data.email, data.password)
    if admin is None:
        raise HTTPException(status_code=401, detail="Invalid credentials")

    session_service.destroy(db, token)
    user_session = session_service.create_admin_session(db, admin.id)
    set_session_cookie(response, user_session.token)
    return {"admin": admin}


@router.post("/logout", response_model=MessageResponse, summary="Déconnexion")
def logout(
    response: Response,
    token: Optional[str] = Depends(get_session_token),
    db: Session = Depends(get_db),
):
    """Détruit la session courante, quelle qu'elle soit."""
    session_service.destroy(db, token)
    clear_session_cookie(response)
    return {"message": "Logged out"}


@router.get("/me", response_model=AdminResponse, summary="Administrateur connecté")
def me(principal: AdminPrincipal = Depends(require_admin), db: Session = Depends(get_db)):
    admin = admin_service.get_admin(db, principal.admin_id)
    if admin is None:
        raise HTTPException(status_code=401, detail="Admin not found")
    return admin
