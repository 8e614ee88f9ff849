"""
Hachage des mots de passe administrateur et génération des jetons de session.
"""

import secrets

from passlib.context import CryptContext

# pbkdf2_sha256 : hash salé, sans dépendance au backend bcrypt
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Compare un mot de passe en clair au hash stocké. Un hash illisible ne correspond jamais."""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        return False


def generate_session_token() -> str:
    return secrets.token_urlsafe(32)
