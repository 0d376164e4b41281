# catalog/repos/user_repo.py
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from catalog.data.models.user import UserModel


class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: str) -> UserModel | None:
        return self.db.get(UserModel, user_id)

    def list_users(self) -> List[UserModel]:
        return list(self.db.execute(select(UserModel)).scalars().all())

    def create_user(self, user: UserModel) -> UserModel:
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def rollback(self):
        self.db.rollback()
