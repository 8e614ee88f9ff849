"""
Dépendances FastAPI de contrôle d'accès.
Chaque route protégée déclare l'identité exigée : administrateur ou membre.
"""

from typing import Optional

from fastapi import Depends, HTTPException, Request, Response
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.services import session_service
from app.services.session_service import AdminPrincipal, MemberPrincipal


def get_session_token(request: Request) -> Optional[str]:
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


def require_admin(
    token: Optional[str] = Depends(get_session_token),
    db: Session = Depends(get_db),
) -> AdminPrincipal:
    """Exige une session administrateur valide, sinon 401."""
    principal = session_service.resolve(db, token)
    if not isinstance(principal, AdminPrincipal):
        raise HTTPException(status_code=401, detail="Unauthorized")
    return principal


def require_member(
    token: Optional[str] = Depends(get_session_token),
    db: Session = Depends(get_db),
) -> MemberPrincipal:
    """Exige une session membre valide, sinon 401."""
    principal = session_service.resolve(db, token)
    if not isinstance(principal, MemberPrincipal):
        raise HTTPException(status_code=401, detail="Unauthorized")
    return principal


def set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.SESSION_LIFETIME_HOURS * 3600,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax",
        path="/",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax",
        path="/",
    )
