from __future__ import annotations

import time

import jwt
import pytest

from auth import security


class TestTokens:
    def test_issued_token_carries_identity(self, settings):
        token = security.build_access_token(user_id="alice", settings=settings)

        assert security.identity_from_token(token, settings=settings) == "alice"
        payload = jwt.decode(token, settings.jwt_secret, algorithms=["HS256"])
        assert payload["exp"] > payload["iat"]

    def test_integer_id_claim_is_normalized(self, settings):
        token = jwt.encode({"id": 42}, settings.jwt_secret, algorithm="HS256")

        assert security.identity_from_token(token, settings=settings) == "42"

    @pytest.mark.parametrize("claims", [{}, {"id": ""}, {"id": True}, {"id": ["alice"]}])
    def test_unusable_id_claim(self, settings, claims):
        token = jwt.encode(claims, settings.jwt_secret, algorithm="HS256")

        with pytest.raises(security.AuthSecurityError):
            security.identity_from_token(token, settings=settings)

    def test_wrong_secret(self, settings):
        token = jwt.encode({"id": "alice"}, "not-the-secret", algorithm="HS256")

        with pytest.raises(security.AuthSecurityError):
            security.decode_access_token(token, settings=settings)

    def test_expired(self, settings):
        token = jwt.encode({"id": "alice", "exp": int(time.time()) - 10}, settings.jwt_secret, algorithm="HS256")

        with pytest.raises(security.AuthSecurityError):
            security.decode_access_token(token, settings=settings)

    def test_empty(self, settings):
        with pytest.raises(security.AuthSecurityError):
            security.decode_access_token("  ", settings=settings)


class TestPasswords:
    def test_hash_and_verify(self):
        hashed = security.hash_password("correct horse")

        assert security.verify_password("correct horse", hashed)
        assert not security.verify_password("wrong horse", hashed)

    def test_verify_against_garbage_hash(self):
        assert not security.verify_password("pw", "not-a-bcrypt-hash")
        assert not security.verify_password("pw", "")

    def test_empty_password_cannot_be_hashed(self):
        with pytest.raises(security.AuthSecurityError):
            security.hash_password("")
