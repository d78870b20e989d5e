"""Loan application routes, with the judgment, balance and repayments of each."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel

from lending.application.usecase.judgment import GetJudgmentUseCase
from lending.application.usecase.judgment.common import JudgmentResponse
from lending.application.usecase.judgment.get_judgment import GetJudgmentRequest
from lending.application.usecase.loan_application import (
    ContractApplicationUseCase,
    CreateApplicationUseCase,
    DeleteApplicationUseCase,
    GetApplicationUseCase,
    ListApplicationsUseCase,
    UpdateApplicationUseCase,
)
from lending.application.usecase.loan_application.common import ApplicationResponse
from lending.application.usecase.loan_application.contract_application import (
    ContractApplicationRequest,
)
from lending.application.usecase.loan_application.create_application import (
    CreateApplicationRequest,
)
from lending.application.usecase.loan_application.delete_application import (
    DeleteApplicationRequest,
    DeleteApplicationResponse,
)
from lending.application.usecase.loan_application.get_application import (
    GetApplicationRequest,
)
from lending.application.usecase.loan_application.list_applications import (
    ListApplicationsResponse,
)
from lending.application.usecase.loan_application.update_application import (
    UpdateApplicationRequest,
)
from lending.application.usecase.repayment import (
    CreateRepaymentUseCase,
    GetBalanceUseCase,
    ListRepaymentsUseCase,
)
from lending.application.usecase.repayment.common import BalanceResponse
from lending.application.usecase.repayment.create_repayment import (
    CreateRepaymentRequest,
    CreateRepaymentResponse,
)
from lending.application.usecase.repayment.get_balance import GetBalanceRequest
from lending.application.usecase.repayment.list_repayments import (
    ListRepaymentsRequest,
    ListRepaymentsResponse,
)
from lending.domain.service import JWTService
from lending.interface.api.auth import require_admin

router = APIRouter(
    prefix="/applications", tags=["applications"], route_class=DishkaRoute
)


class UpdateApplicationAPIRequest(BaseModel):
    """API request for updating a loan application."""

    name: str | None = None
    cell_phone: str | None = None
    email: str | None = None
    interest_rate: float | None = None
    fee: int | None = None
    maturity: datetime | None = None
    hope_amount: int | None = None


class RepaymentAPIRequest(BaseModel):
    """API request for recording a repayment."""

    repayment_amount: int


@router.post(
    "", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED
)
async def create_application(
    request: CreateApplicationRequest,
    create_application_use_case: FromDishka[CreateApplicationUseCase],
) -> ApplicationResponse:
    """Submit a loan application. Open to anonymous visitors.

    Example:
        POST /applications

        Request:
        {
            "name": "Jane Doe",
            "cell_phone": "010-1111-2222",
            "email": "jane@example.com",
            "hope_amount": 5000000
        }

        Response: the application with status "pending"
    """
    return await create_application_use_case.execute(request)


@router.get("", response_model=ListApplicationsResponse)
async def list_applications(
    list_applications_use_case: FromDishka[ListApplicationsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListApplicationsResponse:
    """List active applications, most recent first (admin only)."""
    require_admin(jwt_service, auth_token)
    return await list_applications_use_case.execute()


@router.get("/{application_id}", response_model=ApplicationResponse)
async def get_application(
    application_id: int,
    get_application_use_case: FromDishka[GetApplicationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ApplicationResponse:
    """Get an application by ID (admin only)."""
    require_admin(jwt_service, auth_token)
    return await get_application_use_case.execute(
        GetApplicationRequest(application_id=application_id)
    )


@router.patch("/{application_id}", response_model=ApplicationResponse)
async def update_application(
    application_id: int,
    request: UpdateApplicationAPIRequest,
    update_application_use_case: FromDishka[UpdateApplicationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ApplicationResponse:
    """Update the supplied fields of an application (admin only).

    An explicit null clears the optional loan terms.
    """
    require_admin(jwt_service, auth_token)
    return await update_application_use_case.execute(
        UpdateApplicationRequest(
            application_id=application_id, **request.model_dump(exclude_unset=True)
        )
    )


@router.delete("/{application_id}", response_model=DeleteApplicationResponse)
async def delete_application(
    application_id: int,
    delete_application_use_case: FromDishka[DeleteApplicationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteApplicationResponse:
    """Soft-delete an application (admin only)."""
    require_admin(jwt_service, auth_token)
    return await delete_application_use_case.execute(
        DeleteApplicationRequest(application_id=application_id)
    )


@router.post("/{application_id}/contract", response_model=ApplicationResponse)
async def contract_application(
    application_id: int,
    contract_application_use_case: FromDishka[ContractApplicationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ApplicationResponse:
    """Mark an approved application as contracted (admin only).

    Responds 422 when the application has no judgment or was rejected,
    and 409 when it is already contracted.
    """
    require_admin(jwt_service, auth_token)
    return await contract_application_use_case.execute(
        ContractApplicationRequest(application_id=application_id)
    )


@router.get("/{application_id}/judgment", response_model=JudgmentResponse)
async def get_application_judgment(
    application_id: int,
    get_judgment_use_case: FromDishka[GetJudgmentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> JudgmentResponse:
    """Get the active judgment of an application (admin only)."""
    require_admin(jwt_service, auth_token)
    return await get_judgment_use_case.execute(
        GetJudgmentRequest(application_id=application_id)
    )


@router.get("/{application_id}/balance", response_model=BalanceResponse)
async def get_application_balance(
    application_id: int,
    get_balance_use_case: FromDishka[GetBalanceUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> BalanceResponse:
    """Get the outstanding balance of a disbursed loan (admin only)."""
    require_admin(jwt_service, auth_token)
    return await get_balance_use_case.execute(
        GetBalanceRequest(application_id=application_id)
    )


@router.get("/{application_id}/repayments", response_model=ListRepaymentsResponse)
async def list_application_repayments(
    application_id: int,
    list_repayments_use_case: FromDishka[ListRepaymentsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListRepaymentsResponse:
    """List the repayments of an application, newest first (admin only)."""
    require_admin(jwt_service, auth_token)
    return await list_repayments_use_case.execute(
        ListRepaymentsRequest(application_id=application_id)
    )


@router.post(
    "/{application_id}/repayments",
    response_model=CreateRepaymentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_application_repayment(
    application_id: int,
    request: RepaymentAPIRequest,
    create_repayment_use_case: FromDishka[CreateRepaymentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateRepaymentResponse:
    """Record a repayment against the loan balance (admin only).

    Example:
        POST /applications/7/repayments

        Request:
        {
            "repayment_amount": 100000
        }

        Responds 422 when the amount exceeds the outstanding balance.
    """
    require_admin(jwt_service, auth_token)
    return await create_repayment_use_case.execute(
        CreateRepaymentRequest(
            application_id=application_id,
            repayment_amount=request.repayment_amount,
        )
    )
