"""
Sessions côté serveur. Le cookie ne transporte qu'un jeton opaque.
Une session est soit ADMIN soit MEMBER, jamais les deux.
"""

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String, func

from app.database import Base


class UserSession(Base):
    __tablename__ = "user_sessions"
    __table_args__ = (
        CheckConstraint(
            "(kind = 'ADMIN' AND admin_id IS NOT NULL AND member_id IS NULL) OR "
            "(kind = 'MEMBER' AND member_id IS NOT NULL AND admin_id IS NULL)",
            name="ck_user_sessions_kind",
        ),
    )

    id = Column(Integer, primary_key=True)
    token = Column(String(64), unique=True, nullable=False, index=True)
    kind = Column(String(10), nullable=False)  # ADMIN, MEMBER
    admin_id = Column(Integer, ForeignKey("admins.id", ondelete="CASCADE"), nullable=True)
    member_id = Column(Integer, ForeignKey("members.id", ondelete="CASCADE"), nullable=True)
    expires_at = Column(DateTime, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
