"""initial_schema

Create the schema for the lending API:
- Users (identity, role, lifecycle status, soft delete)
- Terms (versioned terms catalogue)
- User terms agreements (per-user current agreement set)

Revision ID: 3c1f9a7d2e84
Revises:
Create Date: 2026-10-18 10:12:04.518230

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1f9a7d2e84"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("user_id", sa.String(64), nullable=False),  # user_<millis>_<suffix>
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("external_provider_id", sa.String(255), nullable=True),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column("email_verified_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("role", sa.String(20), nullable=False, server_default="user"),
        sa.Column("status", sa.String(20), nullable=False, server_default="active"),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default="false"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("user_id"),
        sa.CheckConstraint("role IN ('user', 'admin')", name="users_role_check"),
        sa.CheckConstraint(
            "status IN ('active', 'inactive')", name="users_status_check"
        ),
    )
    # Backs the atomic find-or-create on sign-in; NULLs never collide
    op.create_index(
        "uq_users_external_provider_id",
        "users",
        ["external_provider_id"],
        unique=True,
    )
    op.create_index("idx_users_email", "users", ["email"])
    op.create_index(
        "idx_users_active_created_at",
        "users",
        [sa.text("created_at DESC")],
        postgresql_where=sa.text("is_deleted = false"),
    )

    # ========================================================================
    # TERMS table
    # ========================================================================
    op.create_table(
        "terms",
        sa.Column("terms_id", sa.Integer(), sa.Identity(always=False), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("terms_detail_url", sa.Text(), nullable=False),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("version", sa.String(50), nullable=True),
        sa.Column("is_required", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default="false"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("terms_id"),
    )

    # ========================================================================
    # USER_TERMS_AGREEMENTS table
    # ========================================================================
    op.create_table(
        "user_terms_agreements",
        sa.Column(
            "agreement_id", sa.Integer(), sa.Identity(always=False), nullable=False
        ),
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column("terms_id", sa.Integer(), nullable=False),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default="false"),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["users.user_id"]),
        sa.ForeignKeyConstraint(["terms_id"], ["terms.terms_id"]),
        sa.PrimaryKeyConstraint("agreement_id"),
    )
    op.create_index(
        "idx_user_terms_agreements_current",
        "user_terms_agreements",
        ["user_id"],
        postgresql_where=sa.text("is_deleted = false"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(
        "idx_user_terms_agreements_current", table_name="user_terms_agreements"
    )
    op.drop_table("user_terms_agreements")
    op.drop_table("terms")
    op.drop_index("idx_users_active_created_at", table_name="users")
    op.drop_index("idx_users_email", table_name="users")
    op.drop_index("uq_users_external_provider_id", table_name="users")
    op.drop_table("users")
