import pytest

from src.app.use_cases.centers import (
    AddCenterCommand,
    AddCenterUseCase,
    GetCenterByCodeUseCase,
)
from src.domain.entities import CenterAffiliation, YesNo


@pytest.fixture
def command(test_data):
    return AddCenterCommand(**test_data.get_copy("center"))


@pytest.mark.asyncio
async def test_add_center(mock_uow, command):
    mock_uow.centers.get_by_code.return_value = None

    result = await AddCenterUseCase(mock_uow).execute(command)

    assert result.is_ok()
    assert result.value.message == "Center affiliation submitted successfully"
    created: CenterAffiliation = mock_uow.centers.create.call_args.args[0]
    assert created.center_code == "NC-001"
    assert created.office == YesNo.yes
    assert created.library == YesNo.no
    assert result.value.center.id == str(created.id)
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_add_center_trims_code_before_uniqueness_check(mock_uow, command):
    command.center_code = "  NC-001 "
    mock_uow.centers.get_by_code.return_value = None

    await AddCenterUseCase(mock_uow).execute(command)

    mock_uow.centers.get_by_code.assert_awaited_once_with("NC-001")


@pytest.mark.asyncio
async def test_duplicate_center_code(mock_uow, command):
    mock_uow.centers.get_by_code.return_value = CenterAffiliation(
        **command.model_dump()
    )

    result = await AddCenterUseCase(mock_uow).execute(command)

    assert result.is_err()
    assert result.error.code == "CENTER_CODE_EXISTS"
    mock_uow.centers.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_get_unknown_center(mock_uow):
    mock_uow.centers.get_by_code.return_value = None

    result = await GetCenterByCodeUseCase(mock_uow).execute("NOPE")

    assert result.is_err()
    assert result.error.code == "CENTER_NOT_FOUND"
