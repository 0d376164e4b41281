from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from catalog.data.models import UserModel
from catalog.services.access_guard import (
    ADMIN_ONLY,
    STAFF,
    CredentialMissing,
    CredentialRejected,
    Forbidden,
    Unauthenticated,
    authenticate,
    authorize,
)
from catalog.services.identity_provider import IdentityProvider, IdentityProviderError


class FakeVerifier:
    def __init__(self, uid="uid-1", error=None):
        self.uid = uid
        self.error = error
        self.seen = []

    def verify_token(self, token):
        self.seen.append(token)
        if self.error:
            raise IdentityProviderError(self.error)
        return {"uid": self.uid, "email": None}


class FakeUsers:
    def __init__(self, *users):
        self.users = {u.id: u for u in users}

    def get_user(self, user_id):
        return self.users.get(user_id)


def account(uid, role):
    return UserModel(id=uid, nombre="Test", email=f"{uid}@stagestyle.cl", region="RM", comuna="Ñuñoa", role=role)


# ---------------------------------------------------------------- authenticate


@pytest.mark.parametrize("header", [None, "", "abc.def.ghi", "Token abc", "bearer abc"])
def test_missing_or_malformed_header_is_401(header):
    verifier = FakeVerifier()

    with pytest.raises(CredentialMissing) as exc:
        authenticate(header, verifier)

    assert exc.value.status_code == 401
    assert exc.value.detail == {"mensaje": "Acceso denegado. No se proporcionó un token válido."}
    assert verifier.seen == []


def test_rejected_token_is_403_with_provider_detail():
    with pytest.raises(CredentialRejected) as exc:
        authenticate("Bearer expired", FakeVerifier(error="Signature has expired."))

    assert isinstance(exc.value, Unauthenticated)
    assert exc.value.status_code == 403
    assert exc.value.detail == {"mensaje": "Token inválido o expirado.", "error": "Signature has expired."}


def test_valid_token_yields_subject():
    verifier = FakeVerifier(uid="abc123")

    assert authenticate("Bearer tok3n", verifier) == "abc123"
    assert verifier.seen == ["tok3n"]


# ---------------------------------------------------------------- authorize


def test_unknown_subject_is_forbidden():
    with pytest.raises(Forbidden) as exc:
        authorize("ghost", ADMIN_ONLY, FakeUsers())

    assert exc.value.status_code == 403
    assert exc.value.message == "Usuario no registrado en base de datos."


def test_role_outside_allow_list_is_forbidden():
    users = FakeUsers(account("c1", "Cliente"))

    with pytest.raises(Forbidden) as exc:
        authorize("c1", ADMIN_ONLY, users)

    assert exc.value.message == "Acceso denegado. Se requiere rol: Administrador"
    assert isinstance(exc.value, PermissionError)


def test_allow_list_is_echoed():
    with pytest.raises(Forbidden) as exc:
        authorize("c1", STAFF, FakeUsers(account("c1", "Cliente")))

    assert exc.value.message == "Acceso denegado. Se requiere rol: Administrador, Vendedor"


def test_missing_role_counts_as_cliente():
    users = FakeUsers(account("u1", None))

    with pytest.raises(Forbidden):
        authorize("u1", STAFF, users)
    assert authorize("u1", ("Cliente",), users).id == "u1"


@pytest.mark.parametrize("role, allowed", [("Administrador", ADMIN_ONLY), ("Administrador", STAFF), ("Vendedor", STAFF)])
def test_allowed_role_is_authorized(role, allowed):
    user = account("u1", role)

    assert authorize("u1", allowed, FakeUsers(user)) is user


# ---------------------------------------------------------------- identity provider


def test_account_sign_in_and_token_round_trip(db):
    identity = IdentityProvider(db)
    uid = identity.create_account("Vendedor@StageStyle.cl", "secreto123")

    signed_uid, token = identity.sign_in("vendedor@stagestyle.cl", "secreto123")

    assert signed_uid == uid
    assert identity.verify_token(token) == {"uid": uid, "email": "vendedor@stagestyle.cl"}
    assert authenticate(f"Bearer {token}", identity) == uid


def test_duplicate_email_is_rejected(db):
    identity = IdentityProvider(db)
    identity.create_account("a@stagestyle.cl", "secreto123")

    with pytest.raises(IdentityProviderError, match="already in use"):
        identity.create_account("a@stagestyle.cl", "otraclave")


def test_wrong_password_is_rejected(db):
    identity = IdentityProvider(db)
    identity.create_account("a@stagestyle.cl", "secreto123")

    with pytest.raises(IdentityProviderError):
        identity.sign_in("a@stagestyle.cl", "incorrecta")
    with pytest.raises(IdentityProviderError):
        identity.sign_in("nadie@stagestyle.cl", "secreto123")


def test_password_is_not_stored_in_clear(db):
    identity = IdentityProvider(db)
    identity.create_account("a@stagestyle.cl", "secreto123")

    credential = identity.repo.get_by_email("a@stagestyle.cl")

    assert credential.password_hash != "secreto123"
    assert credential.password_hash.startswith("$pbkdf2-sha256$")


def test_expired_token_is_rejected(db):
    identity = IdentityProvider(db, expire_minutes=-1)
    token = identity.issue_token("uid-1")

    with pytest.raises(CredentialRejected) as exc:
        authenticate(f"Bearer {token}", identity)
    assert "expired" in exc.value.error.lower()


def test_token_from_another_secret_is_rejected(db):
    token = IdentityProvider(db, secret="other-secret").issue_token("uid-1")

    with pytest.raises(IdentityProviderError):
        IdentityProvider(db).verify_token(token)


def test_token_without_subject_is_rejected(db):
    claims = {"email": "x@stagestyle.cl", "exp": datetime.now(timezone.utc) + timedelta(minutes=5)}
    token = jwt.encode(claims, "test-secret", algorithm="HS256")

    with pytest.raises(IdentityProviderError, match="no subject"):
        IdentityProvider(db).verify_token(token)
