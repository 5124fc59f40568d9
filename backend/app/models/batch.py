from sqlalchemy import (
    Column,
    Integer,
    String,
    Text,
    Numeric,
    DateTime,
    ForeignKey,
    CheckConstraint,
    Index,
    func,
)
from sqlalchemy.orm import relationship
from app.database import Base


BATCH_STATUSES = ("Active", "Completed", "Cancelled")
APPROVAL_STATUSES = ("Pending", "Approved", "Rejected")


class Batch(Base):
    """Production batch.

    ``status`` is the operational state and ``approval_status`` the QA review
    state; the two move independently.
    """

    __tablename__ = "batches"
    __table_args__ = (
        CheckConstraint(
            "status IN ('Active', 'Completed', 'Cancelled')",
            name="ck_batches_status",
        ),
        CheckConstraint(
            "approval_status IN ('Pending', 'Approved', 'Rejected')",
            name="ck_batches_approval_status",
        ),
        CheckConstraint(
            "quantity_unit IN ('kg', 'L', 'g', 'mL')",
            name="ck_batches_quantity_unit",
        ),
        Index("ix_batches_status_created", "status", "created_at"),
        Index("ix_batches_approval_status", "approval_status"),
    )

    id = Column(Integer, primary_key=True, index=True)
    batch_number = Column(String(100), nullable=False, unique=True, index=True)
    raw_material_id = Column(Integer, ForeignKey("raw_materials.id"), nullable=False, index=True)
    source_id = Column(Integer, ForeignKey("suppliers.id"), nullable=False, index=True)
    production_date = Column(DateTime, nullable=False)
    acquisition_date = Column(DateTime, nullable=False)
    buyer = Column(String(200), nullable=False)
    contents = Column(Text, nullable=False)
    status = Column(String(20), nullable=False, default="Active")
    approval_status = Column(String(20), nullable=False, default="Pending")
    quantity_value = Column(Numeric(12, 3), nullable=False)
    quantity_unit = Column(String(5), nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=func.now(), nullable=False)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now(), nullable=False)

    raw_material = relationship("RawMaterial", lazy="joined")
    source = relationship("Supplier", lazy="joined")

    @property
    def quantity(self) -> dict:
        return {"value": self.quantity_value, "unit": self.quantity_unit}
