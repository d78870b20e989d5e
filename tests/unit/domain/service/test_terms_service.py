"""Unit tests for TermsService."""

import pytest

from lending.domain.error import NotFoundError, ValidationError
from lending.domain.service import TermsService
from lending.domain.value import TermsId
from lending.persistence.repository.inmemory import InMemoryTermsRepository


@pytest.fixture
def service() -> TermsService:
    return TermsService(InMemoryTermsRepository())


@pytest.mark.asyncio
async def test_create_assigns_sequential_ids(service):
    """Should assign increasing IDs and default to required."""
    first = await service.create_terms("Service terms", "https://x/terms")
    second = await service.create_terms(
        "Marketing", "https://x/marketing", version="v2", is_required=False
    )

    assert second.terms_id > first.terms_id
    assert first.is_required is True
    assert second.is_required is False
    assert second.version == "v2"


@pytest.mark.asyncio
@pytest.mark.parametrize("name,url", [("", "https://x/terms"), ("Terms", "  ")])
async def test_create_requires_name_and_url(service, name, url):
    """Should raise ValidationError when name or URL is blank."""
    with pytest.raises(ValidationError):
        await service.create_terms(name, url)


@pytest.mark.asyncio
async def test_list_ordered_by_id_without_deleted(service):
    """Should list active terms in ID order."""
    a = await service.create_terms("A", "https://x/a")
    b = await service.create_terms("B", "https://x/b")
    c = await service.create_terms("C", "https://x/c")
    await service.delete_terms(b.terms_id)

    terms = await service.list_terms()

    assert [t.terms_id for t in terms] == [a.terms_id, c.terms_id]


@pytest.mark.asyncio
async def test_get_unknown_terms(service):
    """Should raise NotFoundError."""
    with pytest.raises(NotFoundError):
        await service.get_terms(TermsId(42))


@pytest.mark.asyncio
async def test_update_merges_supplied_fields(service):
    """Should change only the supplied fields."""
    created = await service.create_terms("A", "https://x/a", content="v1 text")

    updated = await service.update_terms(created.terms_id, version="v2")

    assert updated.version == "v2"
    assert updated.name == "A"
    assert updated.content == "v1 text"
    assert (await service.get_terms(created.terms_id)).version == "v2"


@pytest.mark.asyncio
async def test_update_can_make_terms_optional(service):
    """Should accept False as a supplied value."""
    created = await service.create_terms("A", "https://x/a")

    updated = await service.update_terms(created.terms_id, is_required=False)

    assert updated.is_required is False


@pytest.mark.asyncio
async def test_deleted_terms_are_not_found(service):
    """Should hide deleted terms from get, update and a second delete."""
    created = await service.create_terms("A", "https://x/a")
    await service.delete_terms(created.terms_id)

    with pytest.raises(NotFoundError):
        await service.get_terms(created.terms_id)
    with pytest.raises(NotFoundError):
        await service.update_terms(created.terms_id, name="B")
    with pytest.raises(NotFoundError):
        await service.delete_terms(created.terms_id)
