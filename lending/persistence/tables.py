"""SQLAlchemy table definitions for the lending service.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    Float,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Sequence,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("user_id", String(64), primary_key=True),  # user_<millis>_<suffix>
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=False),
    Column("phone", String(50), nullable=True),
    Column("external_provider_id", String(255), nullable=True),  # OAuth subject
    Column("avatar_url", Text, nullable=True),
    Column("email_verified_at", TIMESTAMP(timezone=True), nullable=True),
    Column("role", String(20), nullable=False, server_default="user"),
    Column("status", String(20), nullable=False, server_default="active"),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# Unique index backing the atomic find-or-create on sign-in
Index(
    "uq_users_external_provider_id",
    users_table.c.external_provider_id,
    unique=True,
)
Index("idx_users_email", users_table.c.email)
Index(
    "idx_users_active_created_at",
    users_table.c.created_at.desc(),
    postgresql_where=text("is_deleted = false"),
)

# ============================================================================
# TERMS TABLE
# ============================================================================
terms_id_seq = Sequence("terms_terms_id_seq", metadata=metadata)

terms_table = Table(
    "terms",
    metadata,
    Column("terms_id", Integer, terms_id_seq, primary_key=True),
    Column("name", String(255), nullable=False),
    Column("terms_detail_url", Text, nullable=False),
    Column("content", Text, nullable=True),
    Column("version", String(50), nullable=True),
    Column("is_required", Boolean, nullable=False, server_default="true"),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# USER TERMS AGREEMENTS TABLE
# ============================================================================
agreement_id_seq = Sequence("user_terms_agreements_agreement_id_seq", metadata=metadata)

user_terms_agreements_table = Table(
    "user_terms_agreements",
    metadata,
    Column("agreement_id", Integer, agreement_id_seq, primary_key=True),
    Column("user_id", String(64), ForeignKey("users.user_id"), nullable=False),
    Column("terms_id", Integer, ForeignKey("terms.terms_id"), nullable=False),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_user_terms_agreements_current",
    user_terms_agreements_table.c.user_id,
    postgresql_where=text("is_deleted = false"),
)

# ============================================================================
# COUNSELS TABLE
# ============================================================================
counsel_id_seq = Sequence("counsels_counsel_id_seq", metadata=metadata)

counsels_table = Table(
    "counsels",
    metadata,
    Column("counsel_id", Integer, counsel_id_seq, primary_key=True),
    Column("name", String(255), nullable=False),
    Column("cell_phone", String(50), nullable=False),
    Column("email", String(255), nullable=False),
    Column("memo", Text, nullable=True),
    Column("address", Text, nullable=True),
    Column("address_detail", Text, nullable=True),
    Column("zip_code", String(20), nullable=True),
    Column("applied_at", TIMESTAMP(timezone=True), nullable=False),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# APPLICATIONS TABLE
# ============================================================================
application_id_seq = Sequence("applications_application_id_seq", metadata=metadata)

applications_table = Table(
    "applications",
    metadata,
    Column("application_id", Integer, application_id_seq, primary_key=True),
    Column("name", String(255), nullable=False),
    Column("cell_phone", String(50), nullable=False),
    Column("email", String(255), nullable=False),
    Column("interest_rate", Float, nullable=True),
    Column("fee", BigInteger, nullable=True),
    Column("maturity", TIMESTAMP(timezone=True), nullable=True),
    Column("hope_amount", BigInteger, nullable=True),
    Column("applied_at", TIMESTAMP(timezone=True), nullable=False),
    Column("approval_amount", BigInteger, nullable=True),
    Column("contracted_at", TIMESTAMP(timezone=True), nullable=True),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# JUDGMENTS TABLE
# ============================================================================
judgment_id_seq = Sequence("judgments_judgment_id_seq", metadata=metadata)

judgments_table = Table(
    "judgments",
    metadata,
    Column("judgment_id", Integer, judgment_id_seq, primary_key=True),
    Column(
        "application_id",
        Integer,
        ForeignKey("applications.application_id"),
        nullable=False,
    ),
    Column("name", String(255), nullable=False),
    Column("approval_amount", BigInteger, nullable=False),
    Column("approval_interest_rate", Float, nullable=False),
    Column("reason", Text, nullable=True),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# One active judgment per application
Index(
    "uq_judgments_active_application",
    judgments_table.c.application_id,
    unique=True,
    postgresql_where=text("is_deleted = false"),
)

# ============================================================================
# CONTRACTS TABLE
# ============================================================================
contract_id_seq = Sequence("contracts_contract_id_seq", metadata=metadata)

contracts_table = Table(
    "contracts",
    metadata,
    Column("contract_id", Integer, contract_id_seq, primary_key=True),
    Column(
        "application_id",
        Integer,
        ForeignKey("applications.application_id"),
        nullable=False,
    ),
    Column(
        "judgment_id", Integer, ForeignKey("judgments.judgment_id"), nullable=False
    ),
    Column("amount", BigInteger, nullable=False),
    Column("interest_rate", Float, nullable=False),
    Column("term", Integer, nullable=False),  # Months
    Column("status", String(20), nullable=False, server_default="pending"),
    Column("signed_at", TIMESTAMP(timezone=True), nullable=True),
    Column("activated_at", TIMESTAMP(timezone=True), nullable=True),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# One active contract per application
Index(
    "uq_contracts_active_application",
    contracts_table.c.application_id,
    unique=True,
    postgresql_where=text("is_deleted = false"),
)

# ============================================================================
# REPAYMENTS TABLE
# ============================================================================
repayment_id_seq = Sequence("repayments_repayment_id_seq", metadata=metadata)

repayments_table = Table(
    "repayments",
    metadata,
    Column("repayment_id", Integer, repayment_id_seq, primary_key=True),
    Column(
        "application_id",
        Integer,
        ForeignKey("applications.application_id"),
        nullable=False,
    ),
    Column("repayment_amount", BigInteger, nullable=False),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_repayments_active_application",
    repayments_table.c.application_id,
    postgresql_where=text("is_deleted = false"),
)

# ============================================================================
# BALANCES TABLE
# ============================================================================
balance_id_seq = Sequence("balances_balance_id_seq", metadata=metadata)

balances_table = Table(
    "balances",
    metadata,
    Column("balance_id", Integer, balance_id_seq, primary_key=True),
    Column(
        "application_id",
        Integer,
        ForeignKey("applications.application_id"),
        nullable=False,
    ),
    Column("balance", BigInteger, nullable=False),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("balance >= 0", name="balances_balance_check"),
)

# One active balance per application
Index(
    "uq_balances_active_application",
    balances_table.c.application_id,
    unique=True,
    postgresql_where=text("is_deleted = false"),
)
