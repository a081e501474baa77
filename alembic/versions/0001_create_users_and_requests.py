"""Create users and employee_request tables.

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=20), server_default="USER", nullable=False),
        sa.CheckConstraint("role IN ('ADMIN', 'USER')", name="ck_users_role"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )
    op.create_table(
        "employee_request",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("type", sa.String(length=50), nullable=False),
        sa.Column("reason", sa.String(), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("status", sa.String(length=50), server_default="pending", nullable=False),
        sa.CheckConstraint(
            "status IN ('pending', 'accepted', 'denied')", name="ck_employee_request_status"
        ),
        sa.CheckConstraint(
            "type IN ('work_from_home', 'holiday', 'halfday', 'other')", name="ck_employee_request_type"
        ),
        sa.CheckConstraint("end_date >= start_date", name="ck_employee_request_date_order"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_employee_request_user_id", "employee_request", ["user_id"])
    op.create_index("ix_employee_request_start_date", "employee_request", ["start_date"])
    op.create_index("ix_employee_request_status", "employee_request", ["status"])
    op.create_index("ix_employee_request_user_start", "employee_request", ["user_id", "start_date"])


def downgrade() -> None:
    op.drop_index("ix_employee_request_user_start", table_name="employee_request")
    op.drop_index("ix_employee_request_status", table_name="employee_request")
    op.drop_index("ix_employee_request_start_date", table_name="employee_request")
    op.drop_index("ix_employee_request_user_id", table_name="employee_request")
    op.drop_table("employee_request")
    op.drop_table("users")
