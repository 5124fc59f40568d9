from sqlalchemy import (
    Column,
    Integer,
    String,
    Text,
    DateTime,
    JSON,
    CheckConstraint,
    Index,
    func,
)
from app.database import Base


SUPPLIER_STATUSES = ("Approved", "Pending", "Suspended")


class Supplier(Base):
    """Supplier record.

    ``certifications`` and ``quality_issues`` are stored as JSON documents.
    Older rows may hold bare certification names and a numeric issue count
    instead of the current ``{name, expiryDate}`` / ``{description, date}``
    lists; readers must accept both.
    """

    __tablename__ = "suppliers"
    __table_args__ = (
        CheckConstraint(
            "status IN ('Approved', 'Pending', 'Suspended')",
            name="ck_suppliers_status",
        ),
        Index("ix_suppliers_status_created", "status", "created_at"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False, index=True)
    status = Column(String(20), nullable=False, default="Pending")
    certifications = Column(JSON, nullable=False, default=list)
    quality_issues = Column(JSON, nullable=False, default=list)
    last_audit = Column(DateTime, nullable=True)
    contact_email = Column(String(255), nullable=True)
    contact_phone = Column(String(50), nullable=True)
    address = Column(JSON, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=func.now(), nullable=False)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now(), nullable=False)
