"""
Erreurs métier levées par les services.
Toutes dérivent de ValueError ; les routers les traduisent en codes HTTP.
"""


class InvalidOtpError(ValueError):
    """Code absent, déjà utilisé ou expiré. Le motif exact n'est jamais exposé."""

    def __init__(self, message: str = "Invalid or expired OTP"):
        super().__init__(message)


class OtpRequestRejected(ValueError):
    """La politique d'émission refuse un nouveau code pour cet email."""


class ConflictError(ValueError):
    """Contrainte d'unicité ou d'intégrité violée."""


class DuplicateIcError(ConflictError):
    def __init__(self, message: str = "IC already exists"):
        super().__init__(message)


class DuplicateEmailError(ConflictError):
    def __init__(self, message: str = "Email already in use"):
        super().__init__(message)


class LookupInUseError(ConflictError):
    """Suppression d'une entrée de référence encore utilisée par des membres."""


class UnknownClassError(ValueError):
    def __init__(self, message: str = "Unknown class id"):
        super().__init__(message)
