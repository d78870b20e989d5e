"""Unit tests for TermsAgreementService."""

import pytest
import pytest_asyncio

from lending.domain.error import NotFoundError, ValidationError
from lending.domain.service import TermsAgreementService
from lending.domain.value import TermsId, UserId
from lending.persistence.repository.inmemory import (
    InMemoryTermsAgreementRepository,
    InMemoryTermsRepository,
)
from tests.factories import make_terms

USER = UserId("user_1")


@pytest.fixture
def terms_repo() -> InMemoryTermsRepository:
    return InMemoryTermsRepository()


@pytest.fixture
def agreement_repo() -> InMemoryTermsAgreementRepository:
    return InMemoryTermsAgreementRepository()


@pytest_asyncio.fixture
async def service(terms_repo, agreement_repo) -> TermsAgreementService:
    await terms_repo.save(make_terms(1, "Service terms"))
    await terms_repo.save(make_terms(2, "Privacy policy"))
    await terms_repo.save(make_terms(3, "Marketing", is_required=False))
    return TermsAgreementService(agreement_repo, terms_repo)


class TestAgree:
    """Tests for TermsAgreementService.agree()."""

    @pytest.mark.asyncio
    async def test_records_one_agreement_per_terms(self, service):
        """Should record agreements in the given order, collapsing duplicates."""
        agreements = await service.agree(
            USER, [TermsId(2), TermsId(1), TermsId(2)]
        )

        assert [a.terms_id for a in agreements] == [2, 1]
        assert all(a.user_id == USER for a in agreements)

    @pytest.mark.asyncio
    async def test_agreeing_again_supersedes(self, service, agreement_repo):
        """Should replace the current set with the new one."""
        await service.agree(USER, [TermsId(1), TermsId(2)])

        await service.agree(USER, [TermsId(3)])

        current = await agreement_repo.find_current_by_user(USER)
        assert [a.terms_id for a in current] == [3]

    @pytest.mark.asyncio
    async def test_unknown_terms_leaves_current_set(self, service, agreement_repo):
        """Should raise NotFoundError before changing anything."""
        await service.agree(USER, [TermsId(1)])

        with pytest.raises(NotFoundError):
            await service.agree(USER, [TermsId(2), TermsId(99)])

        current = await agreement_repo.find_current_by_user(USER)
        assert [a.terms_id for a in current] == [1]

    @pytest.mark.asyncio
    async def test_deleted_terms_cannot_be_agreed(self, service, terms_repo):
        """Should treat deleted terms as unknown."""
        await terms_repo.save(make_terms(4, "Old terms", is_deleted=True))

        with pytest.raises(NotFoundError):
            await service.agree(USER, [TermsId(4)])

    @pytest.mark.asyncio
    async def test_empty_terms_rejected(self, service):
        """Should raise ValidationError."""
        with pytest.raises(ValidationError):
            await service.agree(USER, [])

    @pytest.mark.asyncio
    async def test_blank_user_rejected(self, service):
        """Should raise ValidationError."""
        with pytest.raises(ValidationError):
            await service.agree(UserId(" "), [TermsId(1)])

    @pytest.mark.asyncio
    async def test_users_are_independent(self, service, agreement_repo):
        """Should not supersede another user's agreements."""
        await service.agree(UserId("user_2"), [TermsId(1)])

        await service.agree(USER, [TermsId(2)])

        other = await agreement_repo.find_current_by_user(UserId("user_2"))
        assert [a.terms_id for a in other] == [1]


class TestListForUser:
    """Tests for TermsAgreementService.list_for_user()."""

    @pytest.mark.asyncio
    async def test_includes_terms(self, service):
        """Should pair each current agreement with its terms."""
        await service.agree(USER, [TermsId(1), TermsId(3)])

        agreed = await service.list_for_user(USER)

        assert [(a.agreement.terms_id, a.terms.name) for a in agreed] == [
            (1, "Service terms"),
            (3, "Marketing"),
        ]

    @pytest.mark.asyncio
    async def test_keeps_terms_deleted_after_agreeing(self, service, terms_repo):
        """Should still list agreements to terms deleted later."""
        await service.agree(USER, [TermsId(1)])
        terms = await terms_repo.find_by_id(TermsId(1))
        await terms_repo.save(terms.model_copy(update={"is_deleted": True}))

        agreed = await service.list_for_user(USER)

        assert [a.terms.terms_id for a in agreed] == [1]

    @pytest.mark.asyncio
    async def test_no_agreements(self, service):
        """Should return an empty list."""
        assert await service.list_for_user(USER) == []


class TestCheck:
    """Tests for TermsAgreementService.check()."""

    @pytest.mark.asyncio
    async def test_reports_missing_required_terms(self, service):
        """Should list required terms the user has not agreed to."""
        await service.agree(USER, [TermsId(1), TermsId(3)])

        status = await service.check(USER)

        assert status.has_agreed_to_all_required is False
        assert [t.terms_id for t in status.missing_required_terms] == [2]

    @pytest.mark.asyncio
    async def test_all_required_agreed(self, service):
        """Should pass without the optional terms."""
        await service.agree(USER, [TermsId(1), TermsId(2)])

        status = await service.check(USER)

        assert status.has_agreed_to_all_required is True
        assert status.missing_required_terms == []

    @pytest.mark.asyncio
    async def test_superseded_agreements_do_not_count(self, service):
        """Should only consider the current agreement set."""
        await service.agree(USER, [TermsId(1), TermsId(2)])
        await service.agree(USER, [TermsId(1)])

        status = await service.check(USER)

        assert [t.terms_id for t in status.missing_required_terms] == [2]

    @pytest.mark.asyncio
    async def test_deleted_terms_are_not_required(self, service, terms_repo):
        """Should ignore required terms that were deleted."""
        await service.agree(USER, [TermsId(1)])
        terms = await terms_repo.find_by_id(TermsId(2))
        await terms_repo.save(terms.model_copy(update={"is_deleted": True}))

        status = await service.check(USER)

        assert status.has_agreed_to_all_required is True
