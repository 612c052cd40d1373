import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_issuer import TokenIssuer, TokenSettings, parse_duration
from tests.fixtures.json_loader import TestDataLoader


@pytest.fixture
def test_data():
    return TestDataLoader()


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock()
    uow.users.get_by_id = AsyncMock()
    uow.users.get_by_refresh_token = AsyncMock()
    uow.users.get_by_reset_token_hash = AsyncMock()
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.update = AsyncMock(side_effect=lambda user: user)

    uow.centers = MagicMock()
    uow.centers.create = AsyncMock(side_effect=lambda center: center)
    uow.centers.get_by_code = AsyncMock()
    uow.centers.list_all = AsyncMock()
    return uow


@pytest.fixture
def hasher():
    # Minimum bcrypt cost keeps the suite fast
    return PasswordHasher(rounds=4)


@pytest.fixture
def token_settings():
    return TokenSettings(
        access_secret="unit-access-secret",
        refresh_secret="unit-refresh-secret",
        access_ttl=parse_duration("15m"),
        refresh_ttl=parse_duration("7d"),
    )


@pytest.fixture
def issuer(token_settings):
    return TokenIssuer(token_settings)
