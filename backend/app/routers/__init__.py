# Routers package — Thin Controllers (SRP / DIP)
from app.routers import (
    auth,
    users,
    suppliers,
    raw_materials,
    batches,
    dashboard,
)

__all__ = [
    "auth",
    "users",
    "suppliers",
    "raw_materials",
    "batches",
    "dashboard",
]
