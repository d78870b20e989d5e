"""Loan contract routes. All admin only."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel

from lending.application.usecase.contract import (
    CreateContractUseCase,
    DeleteContractUseCase,
    GetContractUseCase,
    ListContractsUseCase,
    UpdateContractUseCase,
)
from lending.application.usecase.contract.common import ContractResponse
from lending.application.usecase.contract.create_contract import (
    CreateContractRequest,
)
from lending.application.usecase.contract.delete_contract import (
    DeleteContractRequest,
    DeleteContractResponse,
)
from lending.application.usecase.contract.get_contract import GetContractRequest
from lending.application.usecase.contract.list_contracts import (
    ListContractsResponse,
)
from lending.application.usecase.contract.update_contract import (
    UpdateContractRequest,
)
from lending.domain.service import JWTService
from lending.domain.value import ContractStatus
from lending.interface.api.auth import require_admin

router = APIRouter(prefix="/contracts", tags=["contracts"], route_class=DishkaRoute)


class UpdateContractAPIRequest(BaseModel):
    """API request for moving a contract to its next status."""

    status: ContractStatus
    signed_at: datetime | None = None
    activated_at: datetime | None = None


@router.post("", response_model=ContractResponse, status_code=status.HTTP_201_CREATED)
async def create_contract(
    request: CreateContractRequest,
    create_contract_use_case: FromDishka[CreateContractUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ContractResponse:
    """Draw up a contract for an approved application.

    Example:
        POST /contracts

        Request:
        {
            "application_id": 7,
            "judgment_id": 3,
            "amount": 3000000,
            "interest_rate": 5.5,
            "term": 24
        }
    """
    require_admin(jwt_service, auth_token)
    return await create_contract_use_case.execute(request)


@router.get("", response_model=ListContractsResponse)
async def list_contracts(
    list_contracts_use_case: FromDishka[ListContractsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListContractsResponse:
    """List active contracts, newest first."""
    require_admin(jwt_service, auth_token)
    return await list_contracts_use_case.execute()


@router.get("/{contract_id}", response_model=ContractResponse)
async def get_contract(
    contract_id: int,
    get_contract_use_case: FromDishka[GetContractUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ContractResponse:
    """Get a contract by ID."""
    require_admin(jwt_service, auth_token)
    return await get_contract_use_case.execute(
        GetContractRequest(contract_id=contract_id)
    )


@router.patch("/{contract_id}", response_model=ContractResponse)
async def update_contract(
    contract_id: int,
    request: UpdateContractAPIRequest,
    update_contract_use_case: FromDishka[UpdateContractUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ContractResponse:
    """Move a contract along pending, signed, active and completed.

    Activating a contract disburses the loan and opens its balance.
    Responds 422 on a transition the current status does not allow.
    """
    require_admin(jwt_service, auth_token)
    return await update_contract_use_case.execute(
        UpdateContractRequest(contract_id=contract_id, **request.model_dump())
    )


@router.delete("/{contract_id}", response_model=DeleteContractResponse)
async def delete_contract(
    contract_id: int,
    delete_contract_use_case: FromDishka[DeleteContractUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteContractResponse:
    """Soft-delete a contract that has not been activated."""
    require_admin(jwt_service, auth_token)
    return await delete_contract_use_case.execute(
        DeleteContractRequest(contract_id=contract_id)
    )
