from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from gallerygate.models.user import User
from gallerygate.repositories.base_repository import BaseRepository


class UserRepository(BaseRepository):
    def create_user(self, username: str, name: str, email: str, password_hash: str) -> User:
        user = User(
            username=username,
            name=name,
            email=email,
            password_hash=password_hash,
        )
        self.db.add(user)
        try:
            self.db.commit()
            self.db.refresh(user)
        except IntegrityError:
            self.db.rollback()
            raise
        return user

    def get_user_by_username(self, username: str) -> User | None:
        stmt = select(User).where(User.username == username)
        return self.db.execute(stmt).scalar_one_or_none()
