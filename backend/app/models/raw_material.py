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


MATERIAL_STATUSES = ("In Stock", "Low Stock", "Out of Stock")
QUANTITY_UNITS = ("kg", "L", "g", "mL")


class RawMaterial(Base):
    __tablename__ = "raw_materials"
    __table_args__ = (
        CheckConstraint(
            "status IN ('In Stock', 'Low Stock', 'Out of Stock')",
            name="ck_raw_materials_status",
        ),
        CheckConstraint(
            "quantity_unit IN ('kg', 'L', 'g', 'mL')",
            name="ck_raw_materials_quantity_unit",
        ),
        Index("ix_raw_materials_status_supplier", "status", "supplier_id"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False, index=True)
    purity = Column(String(100), nullable=False)
    supplier_id = Column(Integer, ForeignKey("suppliers.id"), nullable=False, index=True)
    hazard_class = Column(String(100), nullable=False)
    storage_temp = Column(String(100), nullable=False)
    status = Column(String(20), nullable=False, default="In Stock")
    quantity_value = Column(Numeric(12, 3), nullable=False)
    quantity_unit = Column(String(5), nullable=False)
    expiry_date = Column(DateTime, nullable=True)
    lot_number = Column(String(100), nullable=True)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, default=func.now(), nullable=False)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now(), nullable=False)

    supplier = relationship("Supplier", lazy="joined")

    @property
    def quantity(self) -> dict:
        return {"value": self.quantity_value, "unit": self.quantity_unit}
