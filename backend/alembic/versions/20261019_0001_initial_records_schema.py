"""initial records schema: users, suppliers, raw materials, batches

Revision ID: 20261019_0001
Revises:
Create Date: 2026-10-19 08:00:00
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "20261019_0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=20), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("role IN ('admin', 'user', 'qa-worker')", name="ck_users_role"),
    )
    op.create_index("ix_users_id", "users", ["id"], unique=False)
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "suppliers",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("certifications", sa.JSON(), nullable=False),
        sa.Column("quality_issues", sa.JSON(), nullable=False),
        sa.Column("last_audit", sa.DateTime(), nullable=True),
        sa.Column("contact_email", sa.String(length=255), nullable=True),
        sa.Column("contact_phone", sa.String(length=50), nullable=True),
        sa.Column("address", sa.JSON(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "status IN ('Approved', 'Pending', 'Suspended')",
            name="ck_suppliers_status",
        ),
    )
    op.create_index("ix_suppliers_id", "suppliers", ["id"], unique=False)
    op.create_index("ix_suppliers_name", "suppliers", ["name"], unique=False)
    op.create_index("ix_suppliers_status_created", "suppliers", ["status", "created_at"], unique=False)

    op.create_table(
        "raw_materials",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("purity", sa.String(length=100), nullable=False),
        sa.Column("supplier_id", sa.Integer(), nullable=False),
        sa.Column("hazard_class", sa.String(length=100), nullable=False),
        sa.Column("storage_temp", sa.String(length=100), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("quantity_value", sa.Numeric(precision=12, scale=3), nullable=False),
        sa.Column("quantity_unit", sa.String(length=5), nullable=False),
        sa.Column("expiry_date", sa.DateTime(), nullable=True),
        sa.Column("lot_number", sa.String(length=100), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(["supplier_id"], ["suppliers.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "status IN ('In Stock', 'Low Stock', 'Out of Stock')",
            name="ck_raw_materials_status",
        ),
        sa.CheckConstraint(
            "quantity_unit IN ('kg', 'L', 'g', 'mL')",
            name="ck_raw_materials_quantity_unit",
        ),
    )
    op.create_index("ix_raw_materials_id", "raw_materials", ["id"], unique=False)
    op.create_index("ix_raw_materials_name", "raw_materials", ["name"], unique=False)
    op.create_index("ix_raw_materials_supplier_id", "raw_materials", ["supplier_id"], unique=False)
    op.create_index(
        "ix_raw_materials_status_supplier",
        "raw_materials",
        ["status", "supplier_id"],
        unique=False,
    )

    op.create_table(
        "batches",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("batch_number", sa.String(length=100), nullable=False),
        sa.Column("raw_material_id", sa.Integer(), nullable=False),
        sa.Column("source_id", sa.Integer(), nullable=False),
        sa.Column("production_date", sa.DateTime(), nullable=False),
        sa.Column("acquisition_date", sa.DateTime(), nullable=False),
        sa.Column("buyer", sa.String(length=200), nullable=False),
        sa.Column("contents", sa.Text(), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("approval_status", sa.String(length=20), nullable=False),
        sa.Column("quantity_value", sa.Numeric(precision=12, scale=3), nullable=False),
        sa.Column("quantity_unit", sa.String(length=5), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(["raw_material_id"], ["raw_materials.id"]),
        sa.ForeignKeyConstraint(["source_id"], ["suppliers.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "status IN ('Active', 'Completed', 'Cancelled')",
            name="ck_batches_status",
        ),
        sa.CheckConstraint(
            "approval_status IN ('Pending', 'Approved', 'Rejected')",
            name="ck_batches_approval_status",
        ),
        sa.CheckConstraint(
            "quantity_unit IN ('kg', 'L', 'g', 'mL')",
            name="ck_batches_quantity_unit",
        ),
    )
    op.create_index("ix_batches_id", "batches", ["id"], unique=False)
    op.create_index("ix_batches_batch_number", "batches", ["batch_number"], unique=True)
    op.create_index("ix_batches_raw_material_id", "batches", ["raw_material_id"], unique=False)
    op.create_index("ix_batches_source_id", "batches", ["source_id"], unique=False)
    op.create_index("ix_batches_status_created", "batches", ["status", "created_at"], unique=False)
    op.create_index("ix_batches_approval_status", "batches", ["approval_status"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_batches_approval_status", table_name="batches")
    op.drop_index("ix_batches_status_created", table_name="batches")
    op.drop_index("ix_batches_source_id", table_name="batches")
    op.drop_index("ix_batches_raw_material_id", table_name="batches")
    op.drop_index("ix_batches_batch_number", table_name="batches")
    op.drop_index("ix_batches_id", table_name="batches")
    op.drop_table("batches")

    op.drop_index("ix_raw_materials_status_supplier", table_name="raw_materials")
    op.drop_index("ix_raw_materials_supplier_id", table_name="raw_materials")
    op.drop_index("ix_raw_materials_name", table_name="raw_materials")
    op.drop_index("ix_raw_materials_id", table_name="raw_materials")
    op.drop_table("raw_materials")

    op.drop_index("ix_suppliers_status_created", table_name="suppliers")
    op.drop_index("ix_suppliers_name", table_name="suppliers")
    op.drop_index("ix_suppliers_id", table_name="suppliers")
    op.drop_table("suppliers")

    op.drop_index("ix_users_email", table_name="users")
    op.drop_index("ix_users_id", table_name="users")
    op.drop_table("users")
