"""Terms domain service."""

import logfire

from lending.domain.error import NotFoundError, ValidationError
from lending.domain.model import Terms
from lending.domain.model.common import utc_now
from lending.domain.repository import TermsRepository
from lending.domain.value import TermsId

from .base import Service


class TermsService(Service):
    """Domain service for the terms catalogue."""

    def __init__(self, terms_repository: TermsRepository) -> None:
        """Initialize terms service.

        Args:
            terms_repository: Terms repository
        """
        self.terms_repository = terms_repository

    async def create_terms(
        self,
        name: str,
        terms_detail_url: str,
        content: str | None = None,
        version: str | None = None,
        is_required: bool = True,
    ) -> Terms:
        """Publish new terms.

        Args:
            name: Terms title
            terms_detail_url: Link to the full document
            content: Optional inline text
            version: Optional version label
            is_required: Whether users must agree before applying

        Returns:
            Created terms

        Raises:
            ValidationError: If name or URL is missing
        """
        if not name or not name.strip():
            raise ValidationError("Name is required")
        if not terms_detail_url or not terms_detail_url.strip():
            raise ValidationError("Terms detail URL is required")

        with logfire.span("terms_service.create_terms", name=name):
            now = utc_now()
            terms = Terms(
                terms_id=await self.terms_repository.next_id(),
                name=name,
                terms_detail_url=terms_detail_url,
                content=content,
                version=version,
                is_required=is_required,
                created_at=now,
                updated_at=now,
            )
            saved = await self.terms_repository.save(terms)
            logfire.info("Terms created", terms_id=saved.terms_id)
            return saved

    async def list_terms(self) -> list[Terms]:
        """List active terms, ordered by ID."""
        with logfire.span("terms_service.list_terms"):
            return await self.terms_repository.find_all()

    async def get_terms(self, terms_id: TermsId) -> Terms:
        """Get active terms by ID.

        Raises:
            NotFoundError: If the terms do not exist or were deleted
        """
        with logfire.span("terms_service.get_terms", terms_id=terms_id):
            terms = await self.terms_repository.find_by_id(terms_id)
            if not terms:
                logfire.warn("Terms not found", terms_id=terms_id)
                raise NotFoundError("Terms", str(terms_id))
            return terms

    async def update_terms(
        self,
        terms_id: TermsId,
        name: str | None = None,
        terms_detail_url: str | None = None,
        content: str | None = None,
        version: str | None = None,
        is_required: bool | None = None,
    ) -> Terms:
        """Update the supplied fields of active terms.

        Raises:
            ValidationError: If name or URL is supplied blank
            NotFoundError: If the terms do not exist or were deleted
        """
        for field, value in (("Name", name), ("Terms detail URL", terms_detail_url)):
            if value is not None and not value.strip():
                raise ValidationError(f"{field} cannot be blank")

        with logfire.span("terms_service.update_terms", terms_id=terms_id):
            terms = await self.get_terms(terms_id)
            updates = {
                field: value
                for field, value in (
                    ("name", name),
                    ("terms_detail_url", terms_detail_url),
                    ("content", content),
                    ("version", version),
                    ("is_required", is_required),
                )
                if value is not None
            }
            updates["updated_at"] = utc_now()
            saved = await self.terms_repository.save(terms.model_copy(update=updates))
            logfire.info("Terms updated", terms_id=terms_id)
            return saved

    async def delete_terms(self, terms_id: TermsId) -> None:
        """Soft-delete active terms.

        Existing agreements are kept; deleted terms no longer count as
        required.

        Raises:
            NotFoundError: If the terms do not exist or were deleted
        """
        with logfire.span("terms_service.delete_terms", terms_id=terms_id):
            terms = await self.get_terms(terms_id)
            await self.terms_repository.save(
                terms.model_copy(update={"is_deleted": True, "updated_at": utc_now()})
            )
            logfire.info("Terms deleted", terms_id=terms_id)
