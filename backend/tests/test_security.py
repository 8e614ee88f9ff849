"""
Tests unitaires pour le hachage des mots de passe administrateur.
"""

from app.security import generate_session_token, hash_password, verify_password


def test_hash_and_verify_password():
    hashed = hash_password("s3cret")
    assert hashed != "s3cret"
    assert verify_password("s3cret", hashed)
    assert not verify_password("wrong", hashed)


def test_hash_sale():
    assert hash_password("s3cret") != hash_password("s3cret")


def test_verify_hash_illisible():
    assert verify_password("admin", "admin") is False


def test_generate_session_token():
    token = generate_session_token()
    assert len(token) >= 40
    assert token != generate_session_token()
