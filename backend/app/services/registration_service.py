"""
Résolution d'identité et inscription des membres.

Le numéro IC est la clé durable d'un membre. Un membre devient inscrit
(`is_registered`) une seule fois, lors de sa première vérification OTP réussie :
- IC inconnu : le membre est créé directement inscrit ;
- IC pré-inscrit par un administrateur : il passe inscrit et son email est
  remplacé par celui qui vient d'être vérifié ;
- IC déjà inscrit : le membre est retourné tel quel (simple reconnexion).
"""

import logging
from typing import Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.member import Member
from app.schemas.member import PreRegisterCreate
from app.services import audit_service, otp_service
from app.services.email_service import deliver_otp
from app.services.errors import ConflictError, DuplicateIcError, InvalidOtpError
from app.services.member_service import ensure_unique, get_member_by_ic
from app.services.otp_policy import allow_all
from app.services.otp_service import utcnow

logger = logging.getLogger(__name__)

OtpPolicy = Callable[[Session, str, str], None]


def _commit_or_conflict(db: Session) -> None:
    """Valide la transaction ; une collision d'unicité concurrente devient ConflictError (409)."""
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Member data conflicts with an existing record")


def request_otp(db: Session, ic_number: str, email: str, policy: OtpPolicy = allow_all) -> str:
    """
    Émet un code pour l'email fourni et l'envoie.
    Aucune correspondance IC/email n'est exigée ; la politique peut refuser
    l'émission (OtpRequestRejected).
    """
    policy(db, ic_number, email)
    code = otp_service.issue(db, email)
    deliver_otp(email, code)
    return email


def verify_and_register(db: Session, ic_number: str, email: str, code: str) -> Member:
    """
    Vérifie le code puis crée, inscrit ou retrouve le membre correspondant à l'IC.
    Lève InvalidOtpError si le code est refusé ; le code consommé reste consommé
    même si la suite échoue.
    """
    if not otp_service.verify(db, email, code):
        logger.warning("Vérification OTP refusée pour %s", email)
        raise InvalidOtpError()

    member = get_member_by_ic(db, ic_number)

    if member is None:
        ensure_unique(db, email=email)
        now = utcnow()
        member = Member(
            ic_number=ic_number,
            email=email,
            is_registered=True,
            is_pre_registered=False,
            created_at=now,
            updated_at=now,
        )
        db.add(member)
        _commit_or_conflict(db)
        db.refresh(member)
        logger.info("Nouveau membre inscrit : #%s", member.id)

    elif not member.is_registered:
        if member.email != email:
            ensure_unique(db, email=email, exclude_id=member.id)
        member.is_registered = True
        member.email = email
        member.updated_at = utcnow()
        _commit_or_conflict(db)
        db.refresh(member)
        logger.info("Membre pré-inscrit #%s désormais inscrit", member.id)

    return member


def pre_register(db: Session, data: PreRegisterCreate, admin_id: int) -> Member:
    """
    Pré-inscrit un membre (administrateur uniquement).
    Lève DuplicateIcError si l'IC existe déjà, sans aucune modification.
    """
    if get_member_by_ic(db, data.ic_number) is not None:
        raise DuplicateIcError()
    ensure_unique(db, email=data.email)

    now = utcnow()
    member = Member(
        ic_number=data.ic_number,
        email=data.email,
        full_name=data.name,
        is_pre_registered=True,
        is_registered=False,
        created_at=now,
        updated_at=now,
    )
    db.add(member)
    try:
        db.flush()  # Obtenir l'ID avant l'audit
        audit_service.record(
            db, admin_id, audit_service.ACTION_PRE_REGISTER, audit_service.TARGET_MEMBER, member.id,
            details={"ic": data.ic_number},
        )
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Member data conflicts with an existing record")
    db.refresh(member)
    logger.info("Membre pré-inscrit : #%s par admin %s", member.id, admin_id)
    return member
