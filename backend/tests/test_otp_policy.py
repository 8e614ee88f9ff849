"""
Tests unitaires pour les politiques d'émission des codes OTP.
"""

from unittest.mock import MagicMock, patch

import pytest

from app.services import otp_policy
from app.services.errors import OtpRequestRejected
from app.services.otp_policy import EmailRateLimitPolicy, allow_all, get_otp_policy
from app.services.otp_service import issue


def test_allow_all_ne_refuse_jamais():
    assert allow_all(MagicMock(), "900101145678", "a@x.com") is None


def test_rate_limit_sous_le_seuil(db):
    issue(db, "a@x.com")
    EmailRateLimitPolicy(max_requests=2)(db, "900101145678", "a@x.com")


def test_rate_limit_seuil_atteint(db):
    issue(db, "a@x.com")
    issue(db, "a@x.com")
    with pytest.raises(OtpRequestRejected):
        EmailRateLimitPolicy(max_requests=2)(db, "900101145678", "a@x.com")


def test_rate_limit_par_email(db):
    issue(db, "a@x.com")
    issue(db, "a@x.com")
    EmailRateLimitPolicy(max_requests=2)(db, "900101145678", "b@x.com")


def test_get_otp_policy_limite_configuree():
    with patch.object(otp_policy.settings, "OTP_MAX_REQUESTS_PER_HOUR", 3):
        policy = get_otp_policy()
    assert isinstance(policy, EmailRateLimitPolicy)
    assert policy.max_requests == 3


def test_get_otp_policy_limite_desactivee():
    with patch.object(otp_policy.settings, "OTP_MAX_REQUESTS_PER_HOUR", 0):
        assert get_otp_policy() is allow_all
