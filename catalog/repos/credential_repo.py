# catalog/repos/credential_repo.py
from sqlalchemy import select
from sqlalchemy.orm import Session

from catalog.data.models.credential import CredentialModel


class CredentialRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_by_email(self, email: str) -> CredentialModel | None:
        stmt = select(CredentialModel).where(CredentialModel.email == email)
        return self.db.execute(stmt).scalar_one_or_none()

    def create_credential(self, credential: CredentialModel) -> CredentialModel:
        self.db.add(credential)
        self.db.commit()
        self.db.refresh(credential)
        return credential

    def get_credential(self, uid: str) -> CredentialModel | None:
        return self.db.get(CredentialModel, uid)

    def delete_credential(self, credential: CredentialModel) -> None:
        self.db.delete(credential)
        self.db.commit()
