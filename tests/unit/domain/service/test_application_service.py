"""Unit tests for ApplicationService."""

import pytest

from lending.domain.error import ConflictError, NotFoundError, ValidationError
from lending.domain.value import ApplicationId, ApplicationStatus


async def _apply(application_service, name: str = "Jane", **kwargs):
    return await application_service.create(
        name, "010-1111-2222", "jane@example.com", **kwargs
    )


class TestCreate:
    """Tests for ApplicationService.create()."""

    @pytest.mark.asyncio
    async def test_starts_pending(self, application_service):
        application = await _apply(application_service, hope_amount=5_000_000)

        assert application.application_id == 1
        assert application.status == ApplicationStatus.PENDING
        assert application.hope_amount == 5_000_000
        assert application.approval_amount is None
        assert application.is_contracted is False

    @pytest.mark.asyncio
    async def test_requires_contact_fields(self, application_service):
        with pytest.raises(ValidationError, match="cell_phone"):
            await application_service.create("Jane", "", "jane@example.com")

    @pytest.mark.asyncio
    async def test_rejects_negative_amount(self, application_service):
        with pytest.raises(ValidationError, match="hope_amount cannot be negative"):
            await _apply(application_service, hope_amount=-1)


@pytest.mark.asyncio
async def test_list_newest_first_without_deleted(application_service):
    first = await _apply(application_service, "First")
    second = await _apply(application_service, "Second")
    third = await _apply(application_service, "Third")
    await application_service.delete(second.application_id)

    applications = await application_service.list_applications()

    assert [a.application_id for a in applications] == [
        third.application_id,
        first.application_id,
    ]


class TestUpdate:
    """Tests for ApplicationService.update()."""

    @pytest.mark.asyncio
    async def test_null_clears_loan_terms(self, application_service):
        created = await _apply(application_service, fee=1000, hope_amount=10)

        updated = await application_service.update(created.application_id, fee=None)

        assert updated.fee is None
        assert updated.hope_amount == 10

    @pytest.mark.asyncio
    async def test_workflow_fields_not_updatable(self, application_service):
        """Should refuse to set status outside judgment and contracting."""
        created = await _apply(application_service)

        with pytest.raises(ValidationError, match="status"):
            await application_service.update(
                created.application_id, status=ApplicationStatus.APPROVED
            )

    @pytest.mark.asyncio
    async def test_negative_rate_rejected(self, application_service):
        created = await _apply(application_service)

        with pytest.raises(ValidationError, match="interest_rate"):
            await application_service.update(
                created.application_id, interest_rate=-0.5
            )


class TestContract:
    """Tests for ApplicationService.contract()."""

    @pytest.mark.asyncio
    async def test_contracts_approved_application(
        self, application_service, judgment_service
    ):
        created = await _apply(application_service)
        await judgment_service.create(
            created.application_id, "Review", 3_000_000, 5.5
        )

        contracted = await application_service.contract(created.application_id)

        assert contracted.status == ApplicationStatus.CONTRACTED
        assert contracted.approval_amount == 3_000_000
        assert contracted.contracted_at is not None

    @pytest.mark.asyncio
    async def test_twice_conflicts(self, application_service, judgment_service):
        created = await _apply(application_service)
        await judgment_service.create(created.application_id, "Review", 100, 5.0)
        await application_service.contract(created.application_id)

        with pytest.raises(ConflictError):
            await application_service.contract(created.application_id)

    @pytest.mark.asyncio
    async def test_requires_judgment(self, application_service):
        created = await _apply(application_service)

        with pytest.raises(ValidationError, match="not been judged"):
            await application_service.contract(created.application_id)

    @pytest.mark.asyncio
    async def test_rejected_application(self, application_service, judgment_service):
        created = await _apply(application_service)
        await judgment_service.create(created.application_id, "Review", 0, 0.0)

        with pytest.raises(ValidationError, match="rejected"):
            await application_service.contract(created.application_id)

    @pytest.mark.asyncio
    async def test_unknown_application(self, application_service):
        with pytest.raises(NotFoundError):
            await application_service.contract(ApplicationId(404))
