from __future__ import annotations

import pytest
from jose import JWTError, jwt
from jose.exceptions import ExpiredSignatureError

from docflow.config import settings
from docflow.utils.security import (
    create_access_token,
    decode_token,
    hash_password,
    password_needs_rehash,
    verify_password,
)


def test_hash_is_salted_and_not_plaintext():
    first = hash_password("secret1")
    second = hash_password("secret1")
    assert first != second
    assert "secret1" not in first


def test_verify_password_matches_only_same_plaintext():
    hashed = hash_password("secret1")
    assert verify_password("secret1", hashed) is True
    assert verify_password("wrong", hashed) is False


@pytest.mark.parametrize("bad_hash", ["", None, "not-a-hash", "$2b$12$short", "plain:text"])
def test_verify_password_malformed_hash_is_false(bad_hash):
    assert verify_password("secret1", bad_hash) is False


def test_fresh_hash_does_not_need_rehash():
    assert password_needs_rehash(hash_password("secret1")) is False


def test_token_carries_identity_claims():
    token = create_access_token("user-1", "a@x.com", "viewer")
    claims = decode_token(token)
    assert claims["sub"] == "user-1"
    assert claims["username"] == "a@x.com"
    assert claims["role"] == "viewer"
    assert claims["exp"] - claims["iat"] == settings.access_token_expire_minutes * 60


def test_expired_token_is_rejected():
    token = create_access_token("user-1", "a@x.com", "viewer", expires_minutes=-1)
    with pytest.raises(ExpiredSignatureError):
        decode_token(token)


def test_token_signed_with_other_key_is_rejected():
    forged = jwt.encode(
        {"sub": "user-1", "username": "a@x.com", "role": "admin", "exp": 4102444800},
        "other-key",
        algorithm="HS256",
    )
    with pytest.raises(JWTError):
        decode_token(forged)


def test_tampered_payload_is_rejected():
    header, _, signature = create_access_token("user-1", "a@x.com", "viewer").split(".")
    other_payload = create_access_token("user-1", "a@x.com", "admin").split(".")[1]
    with pytest.raises(JWTError):
        decode_token(f"{header}.{other_payload}.{signature}")


def test_unsigned_token_is_rejected():
    header, payload, _ = create_access_token("user-1", "a@x.com", "viewer").split(".")
    with pytest.raises(JWTError):
        decode_token(f"{header}.{payload}.")
