"""Terms and terms agreement routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel

from lending.application.usecase.terms import (
    AgreeToTermsUseCase,
    CheckAgreementsUseCase,
    CreateTermsUseCase,
    DeleteTermsUseCase,
    GetAgreementsUseCase,
    GetTermsUseCase,
    ListTermsUseCase,
    UpdateTermsUseCase,
)
from lending.application.usecase.terms.agree_to_terms import (
    AgreeToTermsRequest,
    AgreeToTermsResponse,
)
from lending.application.usecase.terms.check_agreements import (
    CheckAgreementsRequest,
    CheckAgreementsResponse,
)
from lending.application.usecase.terms.common import TermsResponse
from lending.application.usecase.terms.create_terms import CreateTermsRequest
from lending.application.usecase.terms.delete_terms import (
    DeleteTermsRequest,
    DeleteTermsResponse,
)
from lending.application.usecase.terms.get_agreements import (
    GetAgreementsRequest,
    GetAgreementsResponse,
)
from lending.application.usecase.terms.get_terms import GetTermsRequest
from lending.application.usecase.terms.list_terms import ListTermsResponse
from lending.application.usecase.terms.update_terms import UpdateTermsRequest
from lending.domain.service import JWTService
from lending.interface.api.auth import authenticate, require_admin

router = APIRouter(prefix="/terms", tags=["terms"], route_class=DishkaRoute)


class AgreeToTermsAPIRequest(BaseModel):
    """API request for agreeing to terms."""

    terms_ids: list[int]


class UpdateTermsAPIRequest(BaseModel):
    """API request for updating terms."""

    name: str | None = None
    terms_detail_url: str | None = None
    content: str | None = None
    version: str | None = None
    is_required: bool | None = None


# Agreements for the authenticated user


@router.post(
    "/agreements",
    response_model=AgreeToTermsResponse,
    status_code=status.HTTP_201_CREATED,
)
async def agree_to_terms(
    request: AgreeToTermsAPIRequest,
    agree_to_terms_use_case: FromDishka[AgreeToTermsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AgreeToTermsResponse:
    """Record the user's agreement, replacing their current agreement set.

    Example:
        POST /terms/agreements
        Cookie: auth_token=...

        Request:
        {
            "terms_ids": [1, 2]
        }

        Responds 404 without changing anything when any terms ID is
        unknown or deleted.
    """
    payload = authenticate(jwt_service, auth_token)
    return await agree_to_terms_use_case.execute(
        AgreeToTermsRequest(user_id=payload.user_id, terms_ids=request.terms_ids)
    )


@router.get("/agreements/me", response_model=GetAgreementsResponse)
async def get_my_agreements(
    get_agreements_use_case: FromDishka[GetAgreementsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetAgreementsResponse:
    """List the user's current agreements with their terms."""
    payload = authenticate(jwt_service, auth_token)
    return await get_agreements_use_case.execute(
        GetAgreementsRequest(user_id=payload.user_id)
    )


@router.get("/agreements/me/status", response_model=CheckAgreementsResponse)
async def check_my_agreements(
    check_agreements_use_case: FromDishka[CheckAgreementsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CheckAgreementsResponse:
    """Check whether the user has agreed to every required terms document.

    Example:
        GET /terms/agreements/me/status
        Cookie: auth_token=...

        Response:
        {
            "has_agreed_to_all_required": false,
            "missing_required_terms": [{"terms_id": 3, ...}]
        }
    """
    payload = authenticate(jwt_service, auth_token)
    return await check_agreements_use_case.execute(
        CheckAgreementsRequest(user_id=payload.user_id)
    )


# Terms catalogue


@router.get("", response_model=ListTermsResponse)
async def list_terms(
    list_terms_use_case: FromDishka[ListTermsUseCase],
) -> ListTermsResponse:
    """List active terms, ordered by ID."""
    return await list_terms_use_case.execute()


@router.get("/{terms_id}", response_model=TermsResponse)
async def get_terms(
    terms_id: int,
    get_terms_use_case: FromDishka[GetTermsUseCase],
) -> TermsResponse:
    """Get active terms by ID."""
    return await get_terms_use_case.execute(GetTermsRequest(terms_id=terms_id))


@router.post("", response_model=TermsResponse, status_code=status.HTTP_201_CREATED)
async def create_terms(
    request: CreateTermsRequest,
    create_terms_use_case: FromDishka[CreateTermsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> TermsResponse:
    """Publish new terms (admin only)."""
    require_admin(jwt_service, auth_token)
    return await create_terms_use_case.execute(request)


@router.patch("/{terms_id}", response_model=TermsResponse)
async def update_terms(
    terms_id: int,
    request: UpdateTermsAPIRequest,
    update_terms_use_case: FromDishka[UpdateTermsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> TermsResponse:
    """Update the supplied fields of terms (admin only)."""
    require_admin(jwt_service, auth_token)
    return await update_terms_use_case.execute(
        UpdateTermsRequest(terms_id=terms_id, **request.model_dump(exclude_unset=True))
    )


@router.delete("/{terms_id}", response_model=DeleteTermsResponse)
async def delete_terms(
    terms_id: int,
    delete_terms_use_case: FromDishka[DeleteTermsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteTermsResponse:
    """Soft-delete terms (admin only)."""
    require_admin(jwt_service, auth_token)
    return await delete_terms_use_case.execute(DeleteTermsRequest(terms_id=terms_id))
