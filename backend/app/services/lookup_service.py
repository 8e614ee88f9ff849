"""
Service métier pour les tables de référence : classes, superviseurs, rangs.
"""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.lookup import Rank, Supervisor
from app.models.silat_class import MemberClass, SilatClass
from app.schemas.lookup import ClassCreate, RankCreate, SupervisorCreate
from app.services.errors import LookupInUseError

logger = logging.getLogger(__name__)


def _create(db: Session, model, data):
    entry = model(**data.model_dump())
    db.add(entry)
    db.commit()
    db.refresh(entry)
    logger.info("%s créé : %s (#%s)", model.__name__, entry.name, entry.id)
    return entry


def _delete(db: Session, model, entry_id: int) -> bool:
    entry = db.get(model, entry_id)
    if entry is None:
        return False
    db.delete(entry)
    db.commit()
    logger.info("%s supprimé : #%s", model.__name__, entry_id)
    return True


# --- Classes ---

def get_classes(db: Session) -> list[SilatClass]:
    """Retourne toutes les classes, triées par nom."""
    return db.execute(select(SilatClass).order_by(SilatClass.name)).scalars().all()


def create_class(db: Session, data: ClassCreate) -> SilatClass:
    return _create(db, SilatClass, data)


def delete_class(db: Session, class_id: int) -> bool:
    """
    Supprime une classe.
    Bloqué si des membres y sont encore inscrits.
    Retourne True si supprimée, False si introuvable.
    """
    in_use = db.execute(
        select(MemberClass.id).where(MemberClass.class_id == class_id).limit(1)
    ).scalar()
    if in_use:
        raise LookupInUseError("Class still has members")
    return _delete(db, SilatClass, class_id)


# --- Superviseurs ---

def get_supervisors(db: Session) -> list[Supervisor]:
    """Retourne tous les superviseurs, triés par nom."""
    return db.execute(select(Supervisor).order_by(Supervisor.name)).scalars().all()


def create_supervisor(db: Session, data: SupervisorCreate) -> Supervisor:
    return _create(db, Supervisor, data)


def delete_supervisor(db: Session, supervisor_id: int) -> bool:
    return _delete(db, Supervisor, supervisor_id)


# --- Rangs ---

def get_ranks(db: Session) -> list[Rank]:
    """Retourne tous les rangs, triés par niveau."""
    return db.execute(select(Rank).order_by(Rank.level, Rank.name)).scalars().all()


def create_rank(db: Session, data: RankCreate) -> Rank:
    return _create(db, Rank, data)


def delete_rank(db: Session, rank_id: int) -> bool:
    return _delete(db, Rank, rank_id)
