"""Unit tests for the counsel and loan workflow use cases."""

import pytest

from lending.application.usecase.contract import (
    CreateContractUseCase,
    DeleteContractUseCase,
    UpdateContractUseCase,
)
from lending.application.usecase.contract.create_contract import CreateContractRequest
from lending.application.usecase.contract.delete_contract import DeleteContractRequest
from lending.application.usecase.contract.update_contract import UpdateContractRequest
from lending.application.usecase.counsel import (
    CreateCounselUseCase,
    ListCounselsUseCase,
    UpdateCounselUseCase,
)
from lending.application.usecase.counsel.create_counsel import CreateCounselRequest
from lending.application.usecase.counsel.update_counsel import UpdateCounselRequest
from lending.application.usecase.judgment import (
    CreateJudgmentUseCase,
    GetJudgmentUseCase,
)
from lending.application.usecase.judgment.create_judgment import CreateJudgmentRequest
from lending.application.usecase.judgment.get_judgment import GetJudgmentRequest
from lending.application.usecase.loan_application import (
    CreateApplicationUseCase,
    GetApplicationUseCase,
    UpdateApplicationUseCase,
)
from lending.application.usecase.loan_application.create_application import (
    CreateApplicationRequest,
)
from lending.application.usecase.loan_application.get_application import (
    GetApplicationRequest,
)
from lending.application.usecase.loan_application.update_application import (
    UpdateApplicationRequest,
)
from lending.application.usecase.repayment import (
    CreateRepaymentUseCase,
    DeleteRepaymentUseCase,
    GetBalanceUseCase,
    ListRepaymentsUseCase,
)
from lending.application.usecase.repayment.create_repayment import (
    CreateRepaymentRequest,
)
from lending.application.usecase.repayment.delete_repayment import (
    DeleteRepaymentRequest,
)
from lending.application.usecase.repayment.get_balance import GetBalanceRequest
from lending.application.usecase.repayment.list_repayments import (
    ListRepaymentsRequest,
)
from lending.domain.error import ValidationError
from lending.domain.value import ApplicationStatus, ContractStatus
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _approved_application(unit_env, amount: int = 1_000_000):
    application = await (await unit_env.get(CreateApplicationUseCase)).execute(
        CreateApplicationRequest(
            name="Jane", cell_phone="010-1111-2222", email="jane@example.com"
        )
    )
    judgment = await (await unit_env.get(CreateJudgmentUseCase)).execute(
        CreateJudgmentRequest(
            application_id=application.application_id,
            name="Review",
            approval_amount=amount,
            approval_interest_rate=4.5,
        )
    )
    return application, judgment


@pytest.mark.asyncio
async def test_counsel_message_becomes_memo(unit_env):
    """Should accept the intake form's message field as the memo."""
    create = await unit_env.get(CreateCounselUseCase)

    counsel = await create.execute(
        CreateCounselRequest(
            name="Jane",
            cell_phone="010-1111-2222",
            email="jane@example.com",
            message="Please call me",
        )
    )

    assert counsel.memo == "Please call me"
    listed = await (await unit_env.get(ListCounselsUseCase)).execute()
    assert [c.counsel_id for c in listed.counsels] == [counsel.counsel_id]


@pytest.mark.asyncio
async def test_counsel_update_forwards_explicit_null(unit_env):
    create = await unit_env.get(CreateCounselUseCase)
    counsel = await create.execute(
        CreateCounselRequest(
            name="Jane", cell_phone="010", email="j@x.com", address="1 Main St"
        )
    )

    updated = await (await unit_env.get(UpdateCounselUseCase)).execute(
        UpdateCounselRequest(counsel_id=counsel.counsel_id, address=None)
    )

    assert updated.address is None
    assert updated.name == "Jane"


@pytest.mark.asyncio
async def test_application_update_leaves_unset_fields(unit_env):
    application, _ = await _approved_application(unit_env)

    updated = await (await unit_env.get(UpdateApplicationUseCase)).execute(
        UpdateApplicationRequest(
            application_id=application.application_id, hope_amount=200
        )
    )

    assert updated.hope_amount == 200
    assert updated.status == ApplicationStatus.APPROVED
    assert updated.email == "jane@example.com"


@pytest.mark.asyncio
async def test_get_judgment_needs_an_id(unit_env):
    get_judgment = await unit_env.get(GetJudgmentUseCase)

    with pytest.raises(ValidationError):
        await get_judgment.execute(GetJudgmentRequest())


@pytest.mark.asyncio
async def test_get_judgment_by_application(unit_env):
    application, judgment = await _approved_application(unit_env)

    found = await (await unit_env.get(GetJudgmentUseCase)).execute(
        GetJudgmentRequest(application_id=application.application_id)
    )

    assert found.judgment_id == judgment.judgment_id


@pytest.mark.asyncio
async def test_disbursement_and_repayment(unit_env):
    """Should carry a loan from approval through activation to repayment."""
    # Arrange
    application, judgment = await _approved_application(unit_env)
    contract = await (await unit_env.get(CreateContractUseCase)).execute(
        CreateContractRequest(
            application_id=application.application_id,
            judgment_id=judgment.judgment_id,
            amount=800_000,
            interest_rate=4.5,
            term=12,
        )
    )
    update_contract = await unit_env.get(UpdateContractUseCase)
    await update_contract.execute(
        UpdateContractRequest(
            contract_id=contract.contract_id, status=ContractStatus.SIGNED
        )
    )
    active = await update_contract.execute(
        UpdateContractRequest(
            contract_id=contract.contract_id, status=ContractStatus.ACTIVE
        )
    )

    # Act
    repaid = await (await unit_env.get(CreateRepaymentUseCase)).execute(
        CreateRepaymentRequest(
            application_id=application.application_id, repayment_amount=300_000
        )
    )

    # Assert
    assert active.status == ContractStatus.ACTIVE
    assert repaid.balance.balance == 500_000
    disbursed = await (await unit_env.get(GetApplicationUseCase)).execute(
        GetApplicationRequest(application_id=application.application_id)
    )
    assert disbursed.status == ApplicationStatus.DISBURSED
    assert disbursed.approval_amount == 1_000_000
    history = await (await unit_env.get(ListRepaymentsUseCase)).execute(
        ListRepaymentsRequest(application_id=application.application_id)
    )
    assert [r.repayment_amount for r in history.repayments] == [300_000]

    await (await unit_env.get(DeleteRepaymentUseCase)).execute(
        DeleteRepaymentRequest(repayment_id=repaid.repayment.repayment_id)
    )
    balance = await (await unit_env.get(GetBalanceUseCase)).execute(
        GetBalanceRequest(application_id=application.application_id)
    )
    assert balance.balance == 800_000

    with pytest.raises(ValidationError):
        await (await unit_env.get(DeleteContractUseCase)).execute(
            DeleteContractRequest(contract_id=contract.contract_id)
        )
