"""
User Repository implementation with user-specific operations.
"""
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from ..extensions import db
from ..models import Role, User
from ..utils.security import hash_password, verify_password


class UserRepository:
    """Repository for users and their roles."""

    def __init__(self, session: Optional[Session] = None):
        self.session = session or db.session

    def find(self, user_id: int) -> Optional[User]:
        return self.session.get(User, user_id)

    def find_by_username(self, username: str) -> Optional[User]:
        """Find user by username (case-insensitive)."""
        return self.session.query(User).filter(func.lower(User.username) == username.lower()).first()

    def find_role(self, name: str) -> Optional[Role]:
        return self.session.query(Role).filter(Role.name == name).first()

    def ensure_role(self, name: str) -> Role:
        role = self.find_role(name)
        if role is None:
            role = Role(name=name)
            self.session.add(role)
            self.session.flush()
        return role

    def authenticate(self, username: str, password: str) -> Optional[User]:
        """Return the active user for these credentials, or None."""
        user = self.find_by_username(username)
        if user and user.is_active and verify_password(user.password_hash, password):
            return user
        return None

    def create_user(self, username: str, password: str, email: Optional[str] = None, roles=()) -> User:
        """Create a new user with hashed password."""
        user = User(
            username=username,
            email=email,
            password_hash=hash_password(password),
            is_active=True,
        )
        for name in roles:
            user.roles.append(self.ensure_role(name))
        self.session.add(user)
        self.session.flush()
        return user

    def add_to_role(self, user: User, name: str) -> None:
        if not user.has_role(name):
            user.roles.append(self.ensure_role(name))
            self.session.flush()
