"""PostgreSQL implementation of TermsAgreement repository."""

from sqlalchemy import select, update

from lending.domain.model import TermsAgreement
from lending.domain.model.common import utc_now
from lending.domain.repository import TermsAgreementRepository
from lending.domain.value import AgreementId, UserId
from lending.persistence.mappers import (
    row_to_terms_agreement,
    terms_agreement_to_dict,
)
from lending.persistence.repository.base import PostgresRepository
from lending.persistence.tables import agreement_id_seq, user_terms_agreements_table

agreements = user_terms_agreements_table


class PostgresTermsAgreementRepository(PostgresRepository, TermsAgreementRepository):
    """PostgreSQL implementation of TermsAgreementRepository."""

    async def next_id(self) -> AgreementId:
        """Reserve the next agreement ID from the sequence."""
        result = await self._execute(select(agreement_id_seq.next_value()))
        return AgreementId(result.scalar_one())

    async def save(self, agreement: TermsAgreement) -> TermsAgreement:
        """Save or update an agreement."""
        await self._save_row(
            agreements, agreements.c.agreement_id, terms_agreement_to_dict(agreement)
        )
        return agreement

    async def find_current_by_user(self, user_id: UserId) -> list[TermsAgreement]:
        """Get the user's non-deleted agreements."""
        stmt = (
            select(agreements)
            .where(agreements.c.user_id == user_id)
            .where(agreements.c.is_deleted.is_(False))
            .order_by(agreements.c.agreement_id)
        )
        return [row_to_terms_agreement(row) for row in await self._all(stmt)]

    async def supersede_current(self, user_id: UserId) -> int:
        """Soft-delete the user's current agreements in one statement."""
        stmt = (
            update(agreements)
            .where(agreements.c.user_id == user_id)
            .where(agreements.c.is_deleted.is_(False))
            .values(is_deleted=True, updated_at=utc_now())
        )
        result = await self._execute(stmt)
        return result.rowcount
