"""loan_workflow

Create the schema for the loan workflow:
- Counsels (pre-application contact requests)
- Applications (loan applications with workflow status)
- Judgments (one active credit decision per application)
- Contracts (one active contract per application)
- Repayments and balances (outstanding amount per disbursed loan)

Revision ID: 8e2b4c6a1f37
Revises: 3c1f9a7d2e84
Create Date: 2026-10-18 14:37:51.902114

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "8e2b4c6a1f37"
down_revision: Union[str, Sequence[str], None] = "3c1f9a7d2e84"
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


def _identity(name: str) -> sa.Column:
    return sa.Column(name, sa.Integer(), sa.Identity(always=False), nullable=False)


def _application_fk() -> sa.Column:
    return sa.Column("application_id", sa.Integer(), nullable=False)


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # COUNSELS table
    # ========================================================================
    op.create_table(
        "counsels",
        _identity("counsel_id"),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("cell_phone", sa.String(50), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("memo", sa.Text(), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("address_detail", sa.Text(), nullable=True),
        sa.Column("zip_code", sa.String(20), nullable=True),
        sa.Column("applied_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default="false"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("counsel_id"),
    )

    # ========================================================================
    # APPLICATIONS table
    # ========================================================================
    op.create_table(
        "applications",
        _identity("application_id"),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("cell_phone", sa.String(50), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("interest_rate", sa.Float(), nullable=True),
        sa.Column("fee", sa.BigInteger(), nullable=True),
        sa.Column("maturity", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("hope_amount", sa.BigInteger(), nullable=True),
        sa.Column("applied_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("approval_amount", sa.BigInteger(), nullable=True),
        sa.Column("contracted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default="false"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("application_id"),
        sa.CheckConstraint(
            "status IN ('pending', 'approved', 'rejected', 'contracted', 'disbursed')",
            name="applications_status_check",
        ),
    )

    # ========================================================================
    # JUDGMENTS table
    # ========================================================================
    op.create_table(
        "judgments",
        _identity("judgment_id"),
        _application_fk(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("approval_amount", sa.BigInteger(), nullable=False),
        sa.Column("approval_interest_rate", sa.Float(), nullable=False),
        sa.Column("reason", sa.Text(), nullable=True),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default="false"),
        *_timestamps(),
        sa.ForeignKeyConstraint(["application_id"], ["applications.application_id"]),
        sa.PrimaryKeyConstraint("judgment_id"),
    )
    op.create_index(
        "uq_judgments_active_application",
        "judgments",
        ["application_id"],
        unique=True,
        postgresql_where=sa.text("is_deleted = false"),
    )

    # ========================================================================
    # CONTRACTS table
    # ========================================================================
    op.create_table(
        "contracts",
        _identity("contract_id"),
        _application_fk(),
        sa.Column("judgment_id", sa.Integer(), nullable=False),
        sa.Column("amount", sa.BigInteger(), nullable=False),
        sa.Column("interest_rate", sa.Float(), nullable=False),
        sa.Column("term", sa.Integer(), nullable=False),  # Months
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("signed_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("activated_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default="false"),
        *_timestamps(),
        sa.ForeignKeyConstraint(["application_id"], ["applications.application_id"]),
        sa.ForeignKeyConstraint(["judgment_id"], ["judgments.judgment_id"]),
        sa.PrimaryKeyConstraint("contract_id"),
        sa.CheckConstraint(
            "status IN ('pending', 'signed', 'active', 'completed', 'cancelled')",
            name="contracts_status_check",
        ),
    )
    op.create_index(
        "uq_contracts_active_application",
        "contracts",
        ["application_id"],
        unique=True,
        postgresql_where=sa.text("is_deleted = false"),
    )

    # ========================================================================
    # REPAYMENTS table
    # ========================================================================
    op.create_table(
        "repayments",
        _identity("repayment_id"),
        _application_fk(),
        sa.Column("repayment_amount", sa.BigInteger(), nullable=False),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default="false"),
        *_timestamps(),
        sa.ForeignKeyConstraint(["application_id"], ["applications.application_id"]),
        sa.PrimaryKeyConstraint("repayment_id"),
    )
    op.create_index(
        "idx_repayments_active_application",
        "repayments",
        ["application_id"],
        postgresql_where=sa.text("is_deleted = false"),
    )

    # ========================================================================
    # BALANCES table
    # ========================================================================
    op.create_table(
        "balances",
        _identity("balance_id"),
        _application_fk(),
        sa.Column("balance", sa.BigInteger(), nullable=False),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default="false"),
        *_timestamps(),
        sa.ForeignKeyConstraint(["application_id"], ["applications.application_id"]),
        sa.PrimaryKeyConstraint("balance_id"),
        sa.CheckConstraint("balance >= 0", name="balances_balance_check"),
    )
    op.create_index(
        "uq_balances_active_application",
        "balances",
        ["application_id"],
        unique=True,
        postgresql_where=sa.text("is_deleted = false"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("uq_balances_active_application", table_name="balances")
    op.drop_table("balances")
    op.drop_index("idx_repayments_active_application", table_name="repayments")
    op.drop_table("repayments")
    op.drop_index("uq_contracts_active_application", table_name="contracts")
    op.drop_table("contracts")
    op.drop_index("uq_judgments_active_application", table_name="judgments")
    op.drop_table("judgments")
    op.drop_table("applications")
    op.drop_table("counsels")
