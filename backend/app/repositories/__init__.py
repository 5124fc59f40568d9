# Repository Layer — Data Access (Repository Pattern, GoF)
from app.repositories.base import BaseRepository
from app.repositories.user_repository import UserRepository
from app.repositories.supplier_repository import SupplierRepository
from app.repositories.raw_material_repository import RawMaterialRepository
from app.repositories.batch_repository import BatchRepository
from app.repositories.dashboard_repository import DashboardRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "SupplierRepository",
    "RawMaterialRepository",
    "BatchRepository",
    "DashboardRepository",
]
