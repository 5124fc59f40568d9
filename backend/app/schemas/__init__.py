from app.schemas.user import UserResponse, RegisterRequest, LoginRequest, TokenResponse, UserUpdate, MessageResponse
from app.schemas.supplier import (
    Certification,
    QualityIssue,
    Address,
    SupplierCreate,
    SupplierUpdate,
    SupplierResponse,
    SupplierRef,
)
from app.schemas.raw_material import (
    Quantity,
    RawMaterialCreate,
    RawMaterialUpdate,
    RawMaterialResponse,
    RawMaterialRef,
)
from app.schemas.batch import BatchCreate, BatchUpdate, BatchReviewRequest, BatchResponse
from app.schemas.dashboard import Alert, StatValue, DashboardStats, RecentBatchView
