from app.models.user import User
from app.models.supplier import Supplier
from app.models.raw_material import RawMaterial
from app.models.batch import Batch

__all__ = [
    "User",
    "Supplier",
    "RawMaterial",
    "Batch",
]
