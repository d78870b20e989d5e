"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from lending.domain.model import (
    Balance,
    Contract,
    Counsel,
    Judgment,
    LoanApplication,
    Repayment,
    Terms,
    TermsAgreement,
    User,
)
from lending.domain.value import (
    AgreementId,
    ApplicationId,
    ApplicationStatus,
    BalanceId,
    ContractId,
    ContractStatus,
    CounselId,
    JudgmentId,
    RepaymentId,
    TermsId,
    UserId,
    UserRole,
    UserStatus,
)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        user_id=UserId(row["user_id"]),
        name=row["name"],
        email=row["email"],
        phone=row.get("phone"),
        external_provider_id=row.get("external_provider_id"),
        avatar_url=row.get("avatar_url"),
        email_verified_at=row.get("email_verified_at"),
        role=UserRole(row["role"]),
        status=UserStatus(row["status"]),
        is_deleted=row["is_deleted"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return user.model_dump(mode="python") | {
        "role": user.role.value,
        "status": user.status.value,
    }


def row_to_terms(row: Dict[str, Any]) -> Terms:
    """Convert database row to Terms domain model."""
    return Terms(
        terms_id=TermsId(row["terms_id"]),
        name=row["name"],
        terms_detail_url=row["terms_detail_url"],
        content=row.get("content"),
        version=row.get("version"),
        is_required=row["is_required"],
        is_deleted=row["is_deleted"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def terms_to_dict(terms: Terms) -> Dict[str, Any]:
    """Convert Terms domain model to database dict."""
    return terms.model_dump()


def row_to_terms_agreement(row: Dict[str, Any]) -> TermsAgreement:
    """Convert database row to TermsAgreement domain model."""
    return TermsAgreement(
        agreement_id=AgreementId(row["agreement_id"]),
        user_id=UserId(row["user_id"]),
        terms_id=TermsId(row["terms_id"]),
        is_deleted=row["is_deleted"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def terms_agreement_to_dict(agreement: TermsAgreement) -> Dict[str, Any]:
    """Convert TermsAgreement domain model to database dict."""
    return agreement.model_dump()


def row_to_counsel(row: Dict[str, Any]) -> Counsel:
    """Convert database row to Counsel domain model."""
    return Counsel(
        counsel_id=CounselId(row["counsel_id"]),
        name=row["name"],
        cell_phone=row["cell_phone"],
        email=row["email"],
        memo=row.get("memo"),
        address=row.get("address"),
        address_detail=row.get("address_detail"),
        zip_code=row.get("zip_code"),
        applied_at=row["applied_at"],
        is_deleted=row["is_deleted"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def counsel_to_dict(counsel: Counsel) -> Dict[str, Any]:
    """Convert Counsel domain model to database dict."""
    return counsel.model_dump()


def row_to_loan_application(row: Dict[str, Any]) -> LoanApplication:
    """Convert database row to LoanApplication domain model."""
    return LoanApplication(
        application_id=ApplicationId(row["application_id"]),
        name=row["name"],
        cell_phone=row["cell_phone"],
        email=row["email"],
        interest_rate=row.get("interest_rate"),
        fee=row.get("fee"),
        maturity=row.get("maturity"),
        hope_amount=row.get("hope_amount"),
        applied_at=row["applied_at"],
        approval_amount=row.get("approval_amount"),
        contracted_at=row.get("contracted_at"),
        status=ApplicationStatus(row["status"]),
        is_deleted=row["is_deleted"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def loan_application_to_dict(application: LoanApplication) -> Dict[str, Any]:
    """Convert LoanApplication domain model to database dict."""
    return application.model_dump() | {"status": application.status.value}


def row_to_judgment(row: Dict[str, Any]) -> Judgment:
    """Convert database row to Judgment domain model."""
    return Judgment(
        judgment_id=JudgmentId(row["judgment_id"]),
        application_id=ApplicationId(row["application_id"]),
        name=row["name"],
        approval_amount=row["approval_amount"],
        approval_interest_rate=row["approval_interest_rate"],
        reason=row.get("reason"),
        is_deleted=row["is_deleted"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def judgment_to_dict(judgment: Judgment) -> Dict[str, Any]:
    """Convert Judgment domain model to database dict."""
    return judgment.model_dump()


def row_to_contract(row: Dict[str, Any]) -> Contract:
    """Convert database row to Contract domain model."""
    return Contract(
        contract_id=ContractId(row["contract_id"]),
        application_id=ApplicationId(row["application_id"]),
        judgment_id=JudgmentId(row["judgment_id"]),
        amount=row["amount"],
        interest_rate=row["interest_rate"],
        term=row["term"],
        status=ContractStatus(row["status"]),
        signed_at=row.get("signed_at"),
        activated_at=row.get("activated_at"),
        is_deleted=row["is_deleted"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def contract_to_dict(contract: Contract) -> Dict[str, Any]:
    """Convert Contract domain model to database dict."""
    return contract.model_dump() | {"status": contract.status.value}


def row_to_repayment(row: Dict[str, Any]) -> Repayment:
    """Convert database row to Repayment domain model."""
    return Repayment(
        repayment_id=RepaymentId(row["repayment_id"]),
        application_id=ApplicationId(row["application_id"]),
        repayment_amount=row["repayment_amount"],
        is_deleted=row["is_deleted"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def repayment_to_dict(repayment: Repayment) -> Dict[str, Any]:
    """Convert Repayment domain model to database dict."""
    return repayment.model_dump()


def row_to_balance(row: Dict[str, Any]) -> Balance:
    """Convert database row to Balance domain model."""
    return Balance(
        balance_id=BalanceId(row["balance_id"]),
        application_id=ApplicationId(row["application_id"]),
        balance=row["balance"],
        is_deleted=row["is_deleted"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def balance_to_dict(balance: Balance) -> Dict[str, Any]:
    """Convert Balance domain model to database dict."""
    return balance.model_dump()
