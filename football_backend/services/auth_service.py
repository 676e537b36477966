import logging

from football_backend.core.errors import InvalidCredentials, UserAlreadyExists, UserNotFound
from football_backend.core.security import create_access_token, hash_password, verify_password
from football_backend.models import TokenResponse, User, UserRead, UserRegister, UserRole
from football_backend.repositories.protocols import RecordStore

logger = logging.getLogger(__name__)


def issue_token(user: User) -> TokenResponse:
    role = user.role.value if isinstance(user.role, UserRole) else user.role
    return TokenResponse(
        access_token=create_access_token(user.id, user.email, role),
        user=UserRead.model_validate(user),
    )


class AuthService:
    def __init__(self, store: RecordStore):
        self.store = store

    def register(self, data: UserRegister, role: UserRole = UserRole.USER) -> TokenResponse:
        email = data.email.strip().lower()
        if self.store.users.find_by_email(email) is not None:
            raise UserAlreadyExists()

        user = User(
            name=data.name.strip(),
            email=email,
            password_hash=hash_password(data.password),
            role=role,
        )
        with self.store.transaction():
            self.store.users.create(user)
        logger.info("User %s registered (%s)", user.id, user.role)
        return issue_token(user)

    def login(self, email: str, password: str) -> TokenResponse:
        user = self.store.users.find_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            logger.warning("Failed login for %s", email)
            raise InvalidCredentials()
        return issue_token(user)

    def get_user(self, user_id: int) -> User:
        user = self.store.users.find_by_id(user_id)
        if user is None:
            raise UserNotFound()
        return user

    def ensure_default_admin(self, email: str, password: str, name: str = "Administrator") -> User:
        """Create the admin account once; later calls return the existing user."""
        existing = self.store.users.find_by_email(email)
        if existing is not None:
            return existing

        admin = User(
            name=name,
            email=email.strip().lower(),
            password_hash=hash_password(password),
            role=UserRole.ADMIN,
        )
        with self.store.transaction():
            self.store.users.create(admin)
        logger.info("Default admin %s created", admin.email)
        return admin
