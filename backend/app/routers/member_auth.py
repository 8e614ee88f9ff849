"""
Router d'inscription des membres par code OTP envoyé par email.
POST /api/auth/otp/request : émission d'un code
POST /api/auth/otp/verify  : vérification, création/inscription du membre, ouverture de session
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_session_token, set_session_cookie
from app.schemas.auth import MemberLoginResponse, OtpRequest, OtpRequestResponse, OtpVerify
from app.services import registration_service, session_service
from app.services.errors import ConflictError, InvalidOtpError, OtpRequestRejected
from app.services.otp_policy import get_otp_policy

router = APIRouter(prefix="/api/auth", tags=["Inscription membres"])


@router.post("/otp/request", response_model=OtpRequestResponse, summary="Demander un code OTP")
def request_otp(data: OtpRequest, db: Session = Depends(get_db), policy=Depends(get_otp_policy)):
    """Envoie un code à usage unique à l'email fourni."""
    try:
        email = registration_service.request_otp(db, data.ic_number, data.email, policy=policy)
    except OtpRequestRejected as e:
        raise HTTPException(status_code=429, detail=str(e))
    return {"message": "OTP Sent", "email": email}


@router.post("/otp/verify", response_model=MemberLoginResponse, summary="Vérifier un code OTP")
def verify_otp(
    data: OtpVerify,
    response: Response,
    token: Optional[str] = Depends(get_session_token),
    db: Session = Depends(get_db),
):
    """
    Vérifie le code puis crée ou inscrit le membre correspondant à l'IC,
    et ouvre une session membre. Les échecs de code renvoient tous le même message.
    """
    try:
        member = registration_service.verify_and_register(db, data.ic_number, data.email, data.code)
    except InvalidOtpError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))

    session_service.destroy(db, token)
    user_session = session_service.create_member_session(db, member.id)
    set_session_cookie(response, user_session.token)
    return {"member": member}
