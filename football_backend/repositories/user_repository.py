from typing import Optional

from sqlmodel import Session, col, select

from football_backend.models import User


class SqlUserRepository:
    def __init__(self, session: Session):
        self.session = session

    def create(self, user: User) -> User:
        self.session.add(user)
        self.session.flush()
        self.session.refresh(user)
        return user

    def find_by_id(self, user_id: int) -> Optional[User]:
        return self.session.get(User, user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        return self.session.exec(
            select(User).where(col(User.email) == email.strip().lower())
        ).first()
