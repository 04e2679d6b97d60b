"""Create users and pantry entries

Revision ID: 4f2c9a1d7b3e
Revises:
Create Date: 2026-01-14 19:12:08.417230

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4f2c9a1d7b3e"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_id"), "users", ["id"], unique=False)
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "pantry_entries",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("quantity", sa.Float(), nullable=False),
        sa.Column("unit", sa.String(length=20), nullable=False),
        sa.Column("purchase_date", sa.Date(), nullable=True),
        sa.Column("date_label_type", sa.String(length=50), nullable=True),
        sa.Column("date_on_package", sa.Date(), nullable=True),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        sa.CheckConstraint("quantity > 0", name="ck_pantry_entries_quantity_positive"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_pantry_entries_id"), "pantry_entries", ["id"], unique=False)
    op.create_index(op.f("ix_pantry_entries_user_id"), "pantry_entries", ["user_id"], unique=False)
    op.create_index(op.f("ix_pantry_entries_status"), "pantry_entries", ["status"], unique=False)
    op.create_index(
        "ix_pantry_entries_user_status", "pantry_entries", ["user_id", "status"], unique=False
    )
    op.create_index(
        "ix_pantry_entries_user_status_package_created",
        "pantry_entries",
        ["user_id", "status", "date_on_package", "created_at"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("ix_pantry_entries_user_status_package_created", table_name="pantry_entries")
    op.drop_index("ix_pantry_entries_user_status", table_name="pantry_entries")
    op.drop_index(op.f("ix_pantry_entries_status"), table_name="pantry_entries")
    op.drop_index(op.f("ix_pantry_entries_user_id"), table_name="pantry_entries")
    op.drop_index(op.f("ix_pantry_entries_id"), table_name="pantry_entries")
    op.drop_table("pantry_entries")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_index(op.f("ix_users_id"), table_name="users")
    op.drop_table("users")
