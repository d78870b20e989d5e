"""Counsel domain service."""

from datetime import datetime
from typing import Any

import logfire

from lending.domain.error import NotFoundError, ValidationError
from lending.domain.model import Counsel
from lending.domain.model.common import utc_now
from lending.domain.repository import CounselRepository
from lending.domain.value import CounselId

from .base import Service, check_changes

UPDATABLE_FIELDS = (
    "name",
    "cell_phone",
    "email",
    "memo",
    "address",
    "address_detail",
    "zip_code",
)
NULLABLE_FIELDS = ("memo", "address", "address_detail", "zip_code")
CONTACT_FIELDS = ("name", "cell_phone", "email")


def check_contact(name: str, cell_phone: str, email: str) -> None:
    """Require the contact details every intake form collects.

    Raises:
        ValidationError: Naming each missing field
    """
    values = {"name": name, "cell_phone": cell_phone, "email": email}
    missing = [field for field, value in values.items() if not (value or "").strip()]
    if missing:
        raise ValidationError(
            f"Name, cell phone, and email are required (missing: {', '.join(missing)})"
        )


class CounselService(Service):
    """Domain service for consultation requests."""

    def __init__(self, counsel_repository: CounselRepository) -> None:
        """Initialize counsel service.

        Args:
            counsel_repository: Counsel repository
        """
        self.counsel_repository = counsel_repository

    async def create(
        self,
        name: str,
        cell_phone: str,
        email: str,
        memo: str | None = None,
        address: str | None = None,
        address_detail: str | None = None,
        zip_code: str | None = None,
        applied_at: datetime | None = None,
    ) -> Counsel:
        """Record a consultation request.

        Args:
            name: Contact name
            cell_phone: Contact phone number
            email: Contact email
            memo: Free-form message from the requester
            address: Street address
            address_detail: Unit, floor, etc.
            zip_code: Postal code
            applied_at: Requested contact time, defaults to now

        Returns:
            Created counsel request

        Raises:
            ValidationError: If name, cell phone or email is missing
        """
        check_contact(name, cell_phone, email)

        with logfire.span("counsel_service.create"):
            now = utc_now()
            counsel = Counsel(
                counsel_id=await self.counsel_repository.next_id(),
                name=name,
                cell_phone=cell_phone,
                email=email,
                memo=memo,
                address=address,
                address_detail=address_detail,
                zip_code=zip_code,
                applied_at=applied_at or now,
                created_at=now,
                updated_at=now,
            )
            saved = await self.counsel_repository.save(counsel)
            logfire.info("Counsel created", counsel_id=saved.counsel_id)
            return saved

    async def list_counsels(self) -> list[Counsel]:
        """List active counsel requests, most recent first."""
        with logfire.span("counsel_service.list_counsels"):
            return await self.counsel_repository.find_all()

    async def get(self, counsel_id: CounselId) -> Counsel:
        """Get an active counsel request.

        Raises:
            NotFoundError: If it does not exist or was deleted
        """
        counsel = await self.counsel_repository.find_by_id(counsel_id)
        if not counsel:
            logfire.warn("Counsel not found", counsel_id=counsel_id)
            raise NotFoundError("Counsel", str(counsel_id))
        return counsel

    async def update(self, counsel_id: CounselId, **changes: Any) -> Counsel:
        """Update the given fields of a counsel request.

        The address fields and memo may be passed as None to clear them.

        Raises:
            ValidationError: If a field is unknown, blank or wrongly cleared
            NotFoundError: If it does not exist or was deleted
        """
        check_changes(
            "Counsel",
            changes,
            UPDATABLE_FIELDS,
            nullable=NULLABLE_FIELDS,
            required_text=CONTACT_FIELDS,
        )

        with logfire.span("counsel_service.update", counsel_id=counsel_id):
            counsel = await self.get(counsel_id)
            saved = await self.counsel_repository.save(
                counsel.model_copy(update={**changes, "updated_at": utc_now()})
            )
            logfire.info("Counsel updated", counsel_id=counsel_id)
            return saved

    async def delete(self, counsel_id: CounselId) -> None:
        """Soft-delete a counsel request.

        Raises:
            NotFoundError: If it does not exist or was already deleted
        """
        with logfire.span("counsel_service.delete", counsel_id=counsel_id):
            counsel = await self.get(counsel_id)
            await self.counsel_repository.save(
                counsel.model_copy(update={"is_deleted": True, "updated_at": utc_now()})
            )
            logfire.info("Counsel deleted", counsel_id=counsel_id)
