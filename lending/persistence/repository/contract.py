"""PostgreSQL implementation of Contract repository."""

from typing import Optional

from sqlalchemy import Select, select

from lending.domain.model import Contract
from lending.domain.repository import ContractRepository
from lending.domain.value import ApplicationId, ContractId
from lending.persistence.mappers import contract_to_dict, row_to_contract
from lending.persistence.repository.base import PostgresRepository
from lending.persistence.tables import contract_id_seq, contracts_table

contracts = contracts_table


def _select_active() -> Select:
    return select(contracts).where(contracts.c.is_deleted.is_(False))


class PostgresContractRepository(PostgresRepository, ContractRepository):
    """PostgreSQL implementation of ContractRepository."""

    async def next_id(self) -> ContractId:
        """Reserve the next contract ID from the sequence."""
        result = await self._execute(select(contract_id_seq.next_value()))
        return ContractId(result.scalar_one())

    async def save(self, contract: Contract) -> Contract:
        """Save or update a contract."""
        await self._save_row(
            contracts, contracts.c.contract_id, contract_to_dict(contract)
        )
        return contract

    async def find_by_id(self, contract_id: ContractId) -> Optional[Contract]:
        """Find an active contract by ID."""
        row = await self._first(
            _select_active().where(contracts.c.contract_id == contract_id)
        )
        return row_to_contract(row) if row else None

    async def find_by_application(
        self, application_id: ApplicationId
    ) -> Optional[Contract]:
        """Find the active contract of an application."""
        row = await self._first(
            _select_active().where(contracts.c.application_id == application_id)
        )
        return row_to_contract(row) if row else None

    async def find_all(self) -> list[Contract]:
        """List active contracts, newest first."""
        stmt = _select_active().order_by(
            contracts.c.created_at.desc(), contracts.c.contract_id.desc()
        )
        return [row_to_contract(row) for row in await self._all(stmt)]
