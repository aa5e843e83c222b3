"""Contact and phone models."""

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from contact_directory.persistence.database import Base


class Contact(Base):
    """Contact model representing a person in the directory."""

    __tablename__ = "contacts"

    # Phone slots offered when a contact is created from scratch
    PHONE_TYPES = ("home", "office", "mobile")

    id = Column(Integer, primary_key=True, index=True)
    firstname = Column(String(255), nullable=False)
    lastname = Column(String(255), nullable=False, index=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    phones = relationship(
        "Phone",
        back_populates="contact",
        cascade="all, delete-orphan",
        order_by="Phone.id",
    )

    @property
    def name(self) -> str:
        """Full name, derived from first and last name."""
        return f"{self.firstname} {self.lastname}"

    def __repr__(self) -> str:
        return f"<Contact(id={self.id}, lastname={self.lastname}, email={self.email})>"


class Phone(Base):
    """Phone number owned by a single contact."""

    __tablename__ = "phones"

    id = Column(Integer, primary_key=True, index=True)
    contact_id = Column(
        Integer, ForeignKey("contacts.id", ondelete="CASCADE"), nullable=False, index=True
    )
    number = Column(String(50), nullable=True)
    phone_type = Column(String(50), nullable=True)  # 'home', 'office', 'mobile', or free-form

    # Relationships
    contact = relationship("Contact", back_populates="phones")

    def __repr__(self) -> str:
        return f"<Phone(id={self.id}, contact_id={self.contact_id}, phone_type={self.phone_type})>"
