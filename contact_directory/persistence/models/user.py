"""User model."""

from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String

from contact_directory.persistence.database import Base


class User(Base):
    """User model representing an account that can sign in."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    role = Column(String(50), nullable=False, default="user")  # admin, user
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"
