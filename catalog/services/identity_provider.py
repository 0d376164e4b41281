# catalog/services/identity_provider.py
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Tuple

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from catalog.data.models.credential import CredentialModel
from catalog.repos.credential_repo import CredentialRepo
from catalog.utils.settings import JWT_SECRET, JWT_ALGORITHM, ACCESS_TOKEN_EXPIRE_MINUTES
from catalog.utils.logging import get_logger

logger = get_logger(__name__)

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


class IdentityProviderError(Exception):
    pass


def normalize_email(email: str) -> str:
    return email.strip().lower()


class IdentityProvider:
    """
    Accounts and bearer tokens.
    - create_account: stores the password hash, returns the uid
    - delete_account: removes the credential again
    - sign_in / issue_token: signed JWT with the uid in "sub"
    - verify_token: decoded claims or IdentityProviderError
    Roles are not part of the token, they live in the users collection.
    """

    def __init__(
        self,
        db: Session,
        secret: str | None = None,
        algorithm: str | None = None,
        expire_minutes: int | None = None,
    ):
        self.repo = CredentialRepo(db)
        self.secret = secret or JWT_SECRET
        self.algorithm = algorithm or JWT_ALGORITHM
        self.expire_minutes = expire_minutes if expire_minutes is not None else ACCESS_TOKEN_EXPIRE_MINUTES

    def create_account(self, email: str, password: str) -> str:
        email = normalize_email(email)
        if self.repo.get_by_email(email):
            raise IdentityProviderError(f"The email address {email} is already in use by another account")

        credential = CredentialModel(
            uid=uuid.uuid4().hex,
            email=email,
            password_hash=pwd_context.hash(password),
        )
        created = self.repo.create_credential(credential)
        logger.info(f"Account {created.uid} created for {email}")
        return created.uid

    def delete_account(self, uid: str) -> None:
        """Undoes create_account when the account record could not be stored."""
        credential = self.repo.get_credential(uid)
        if credential:
            self.repo.delete_credential(credential)
            logger.info(f"Account {uid} removed")

    def find_uid(self, email: str) -> str | None:
        credential = self.repo.get_by_email(normalize_email(email))
        return credential.uid if credential else None

    def sign_in(self, email: str, password: str) -> Tuple[str, str]:
        """Returns (uid, token)."""
        credential = self.repo.get_by_email(normalize_email(email))
        if not credential or not pwd_context.verify(password, credential.password_hash):
            raise IdentityProviderError("Invalid email or password")
        return credential.uid, self.issue_token(credential.uid, credential.email)

    def issue_token(self, uid: str, email: str | None = None) -> str:
        now = datetime.now(timezone.utc)
        claims = {
            "sub": uid,
            "email": email,
            "iat": now,
            "exp": now + timedelta(minutes=self.expire_minutes),
        }
        return jwt.encode(claims, self.secret, algorithm=self.algorithm)

    def verify_token(self, token: str) -> Dict[str, Any]:
        try:
            claims = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError as e:
            raise IdentityProviderError(str(e)) from e

        uid = claims.get("sub")
        if not uid:
            raise IdentityProviderError("Token has no subject")
        return {"uid": uid, "email": claims.get("email")}
