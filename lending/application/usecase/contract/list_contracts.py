"""List contracts use case."""

from pydantic import BaseModel

from lending.domain.service import ContractService

from .common import ContractResponse


class ListContractsResponse(BaseModel):
    """List contracts response."""

    contracts: list[ContractResponse]


class ListContractsUseCase:
    """Use case for listing contracts."""

    def __init__(self, contract_service: ContractService) -> None:
        self.contract_service = contract_service

    async def execute(self) -> ListContractsResponse:
        """Execute list contracts flow."""
        contracts = await self.contract_service.list_contracts()
        return ListContractsResponse(
            contracts=[ContractResponse.from_contract(c) for c in contracts]
        )
