from app.utils.security import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)


def test_password_hash_round_trip() -> None:
    password = "Password123!"
    hashed = get_password_hash(password)

    assert hashed != password
    assert verify_password(password, hashed)
    assert not verify_password("wrong-password", hashed)


def test_verify_password_rejects_invalid_hash() -> None:
    assert verify_password("Password123!", "not-a-valid-bcrypt-hash") is False


def test_access_token_carries_subject_and_role() -> None:
    payload = decode_access_token(create_access_token(subject=42, role="qa-worker"))

    assert payload is not None
    assert payload["sub"] == "42"
    assert payload["role"] == "qa-worker"


def test_tampered_or_expired_token_is_rejected() -> None:
    token = create_access_token(subject=1, role="admin")

    assert decode_access_token(token + "x") is None
    assert decode_access_token(create_access_token(subject=1, role="admin", expires_minutes=-5)) is None
