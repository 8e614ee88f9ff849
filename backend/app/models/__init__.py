# Importe tous les modèles pour enregistrer leurs tables dans Base.metadata
# avant que SQLAlchemy tente de résoudre les clés étrangères inter-modèles
# (member_classes → classes, audit_logs → admins, user_sessions → members).

from app.models.admin import Admin  # noqa: F401
from app.models.member import Member  # noqa: F401
from app.models.silat_class import SilatClass, MemberClass  # noqa: F401
from app.models.lookup import Supervisor, Rank  # noqa: F401
from app.models.otp_code import OtpCode  # noqa: F401
from app.models.audit_log import AuditLog  # noqa: F401
from app.models.user_session import UserSession  # noqa: F401
