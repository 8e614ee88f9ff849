"""
Service métier pour les membres : annuaire paginé, consultation, mise à jour,
suppression et export CSV.
"""

import logging
import math
from typing import Iterable, Optional

from sqlalchemy import delete, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.member import Member
from app.models.silat_class import MemberClass, SilatClass
from app.models.user_session import UserSession
from app.schemas.member import MemberDetailResponse, MemberListResponse, MemberProfileUpdate, MemberResponse
from app.services import audit_service
from app.services.errors import ConflictError, DuplicateEmailError, DuplicateIcError, UnknownClassError
from app.services.otp_service import utcnow

logger = logging.getLogger(__name__)


def get_member_by_ic(db: Session, ic_number: str) -> Optional[Member]:
    return db.execute(select(Member).where(Member.ic_number == ic_number)).scalar()


def ensure_unique(db: Session, ic_number: Optional[str] = None, email: Optional[str] = None,
                  exclude_id: Optional[int] = None) -> None:
    """Lève DuplicateIcError / DuplicateEmailError si un autre membre porte déjà cet IC ou cet email."""
    for column, value, error in (
        (Member.ic_number, ic_number, DuplicateIcError),
        (Member.email, email, DuplicateEmailError),
    ):
        if value is None:
            continue
        query = select(Member.id).where(column == value)
        if exclude_id is not None:
            query = query.where(Member.id != exclude_id)
        if db.execute(query.limit(1)).scalar() is not None:
            raise error()


def get_member_classes(db: Session, member_id: int) -> list[int]:
    """Identifiants des classes du membre."""
    return list(db.execute(
        select(MemberClass.class_id)
        .where(MemberClass.member_id == member_id)
        .order_by(MemberClass.id)
    ).scalars().all())


def _classes_by_member(db: Session, member_ids: list[int]) -> dict[int, list[int]]:
    """Charge les classes de plusieurs membres en une seule requête."""
    classes = {member_id: [] for member_id in member_ids}
    if not member_ids:
        return classes
    rows = db.execute(
        select(MemberClass.member_id, MemberClass.class_id)
        .where(MemberClass.member_id.in_(member_ids))
        .order_by(MemberClass.id)
    ).all()
    for member_id, class_id in rows:
        classes[member_id].append(class_id)
    return classes


def to_detail(member: Member, classes: list[int]) -> MemberDetailResponse:
    response = MemberResponse.model_validate(member)
    return MemberDetailResponse(**response.model_dump(), classes=classes)


def get_member(db: Session, member_id: int) -> Optional[MemberDetailResponse]:
    """Retourne un membre enrichi de ses classes, ou None s'il n'existe pas."""
    member = db.get(Member, member_id)
    if member is None:
        return None
    return to_detail(member, get_member_classes(db, member.id))


def list_members(
    db: Session,
    page: int = 1,
    limit: int = 10,
    search: Optional[str] = None,
    class_id: Optional[int] = None,
) -> MemberListResponse:
    """
    Page de l'annuaire, du plus récent au plus ancien.

    - `search` : sous-chaîne recherchée dans le nom, le numéro IC OU l'email
    - `class_id` : ne garde que les membres inscrits à cette classe
    - `total` compte tous les membres correspondant aux filtres, toutes pages confondues
    """
    conditions = []
    if search:
        conditions.append(or_(
            Member.full_name.contains(search, autoescape=True),
            Member.ic_number.contains(search, autoescape=True),
            Member.email.contains(search, autoescape=True),
        ))
    if class_id is not None:
        conditions.append(Member.id.in_(
            select(MemberClass.member_id).where(MemberClass.class_id == class_id)
        ))

    total = db.execute(
        select(func.count()).select_from(Member).where(*conditions)
    ).scalar() or 0

    members = db.execute(
        select(Member)
        .where(*conditions)
        .order_by(Member.created_at.desc(), Member.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
    ).scalars().all()

    classes = _classes_by_member(db, [m.id for m in members])

    return MemberListResponse(
        data=[to_detail(m, classes[m.id]) for m in members],
        total=total,
        page=page,
        total_pages=math.ceil(total / limit),
    )


def replace_member_classes(db: Session, member_id: int, class_ids: Iterable[int]) -> None:
    """
    Remplace l'ensemble des classes du membre (suppression puis réinsertion).
    Aucun commit ici : l'appelant valide le remplacement dans sa propre transaction,
    si bien qu'aucun lecteur n'observe d'état intermédiaire sans classe.
    Lève UnknownClassError si un identifiant ne correspond à aucune classe.
    """
    class_ids = list(dict.fromkeys(class_ids))
    if class_ids:
        existing = set(db.execute(
            select(SilatClass.id).where(SilatClass.id.in_(class_ids))
        ).scalars().all())
        missing = [cid for cid in class_ids if cid not in existing]
        if missing:
            raise UnknownClassError(f"Unknown class id: {', '.join(str(c) for c in missing)}")

    db.execute(delete(MemberClass).where(MemberClass.member_id == member_id))
    if class_ids:
        db.add_all([MemberClass(member_id=member_id, class_id=cid) for cid in class_ids])
    db.flush()


def update_member(
    db: Session,
    member_id: int,
    data: MemberProfileUpdate,
    admin_id: Optional[int] = None,
) -> Optional[Member]:
    """
    Met à jour les champs fournis d'un membre. Les champs absents ne sont pas modifiés.
    Si `class_ids` est fourni, les classes sont remplacées dans la même transaction.
    Avec `admin_id`, une entrée UPDATE_MEMBER est ajoutée au journal d'audit.
    Retourne None si le membre n'existe pas.
    """
    member = db.get(Member, member_id)
    if member is None:
        return None

    update_data = data.model_dump(exclude_unset=True)
    class_ids = update_data.pop("class_ids", None)

    ensure_unique(
        db,
        ic_number=update_data.get("ic_number"),
        email=update_data.get("email"),
        exclude_id=member_id,
    )

    try:
        for field, value in update_data.items():
            setattr(member, field, value)
        member.updated_at = utcnow()

        if class_ids is not None:
            replace_member_classes(db, member_id, class_ids)

        if admin_id is not None:
            audit_service.record(
                db, admin_id, audit_service.ACTION_UPDATE_MEMBER, audit_service.TARGET_MEMBER, member_id,
                details={"fields": sorted(update_data), "class_ids": class_ids},
            )
        db.commit()
    except UnknownClassError:
        db.rollback()
        raise
    except IntegrityError:
        db.rollback()
        raise ConflictError("Member data conflicts with an existing record")

    db.refresh(member)
    logger.info("Membre %s mis à jour (%s)", member_id, ", ".join(sorted(update_data)) or "classes")
    return member


def delete_member(db: Session, member_id: int, admin_id: int) -> bool:
    """
    Supprime un membre, ses classes et ses sessions ouvertes.
    Retourne True si supprimé, False si introuvable.
    """
    member = db.get(Member, member_id)
    if member is None:
        return False

    db.execute(delete(MemberClass).where(MemberClass.member_id == member_id))
    db.execute(delete(UserSession).where(UserSession.member_id == member_id))
    db.delete(member)
    audit_service.record(
        db, admin_id, audit_service.ACTION_DELETE_MEMBER, audit_service.TARGET_MEMBER, member_id,
        details={"ic": member.ic_number},
    )
    db.commit()
    logger.info("Membre %s supprimé par admin %s", member_id, admin_id)
    return True


def export_members_csv(db: Session) -> str:
    """
    Export CSV simple `IC,Name,Email`, du plus récent au plus ancien.
    Les valeurs ne sont pas échappées : une virgule dans un nom décale les colonnes.
    """
    members = db.execute(
        select(Member).order_by(Member.created_at.desc(), Member.id.desc())
    ).scalars().all()
    lines = ["IC,Name,Email"]
    lines += [f"{m.ic_number},{m.full_name or ''},{m.email}" for m in members]
    return "\n".join(lines)
