"""Unit tests for business profile use cases"""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.profile import (
    GetBusinessProfile,
    UpdateBusinessProfile,
    UpdateBusinessProfileCommandDTO,
    PreferencesDTO,
)
from src.domain.business_profile import BusinessProfile, Preferences


@pytest.fixture
def mock_profile_repo():
    repo = MagicMock()
    repo.save = AsyncMock(side_effect=lambda profile: profile)
    return repo


@pytest.mark.asyncio
class TestGetBusinessProfile:

    async def test_absent_profile_is_none(self, mock_profile_repo):
        mock_profile_repo.get = AsyncMock(return_value=None)

        result = await GetBusinessProfile(mock_profile_repo).execute("acct_1")

        assert result.is_ok()
        assert result.value is None

    async def test_existing_profile(self, mock_profile_repo):
        mock_profile_repo.get = AsyncMock(return_value=BusinessProfile(
            account_id="acct_1", name="Kofi Prints", updated_at=1
        ))

        result = await GetBusinessProfile(mock_profile_repo).execute("acct_1")

        assert result.value.name == "Kofi Prints"
        assert result.value.preferences.invoice_prefix == "INV-"

    async def test_unset_preferences_follow_installation_defaults(self, mock_profile_repo):
        mock_profile_repo.get = AsyncMock(return_value=BusinessProfile(
            account_id="acct_1", preferences={"invoice_prefix": "KP-"}, updated_at=1
        ))
        defaults = Preferences(default_currency="USD")

        result = await GetBusinessProfile(mock_profile_repo, defaults).execute("acct_1")

        assert result.value.preferences.default_currency == "USD"
        assert result.value.preferences.invoice_prefix == "KP-"


@pytest.mark.asyncio
class TestUpdateBusinessProfile:

    async def test_first_save_creates_profile(self, mock_uow, mock_profile_repo):
        mock_profile_repo.get = AsyncMock(return_value=None)

        result = await UpdateBusinessProfile(mock_uow, mock_profile_repo).execute(
            "acct_1", UpdateBusinessProfileCommandDTO(name="Kofi Prints", tin="C001")
        )

        assert result.value.account_id == "acct_1"
        assert result.value.name == "Kofi Prints"
        assert result.value.tin == "C001"
        mock_uow.commit.assert_called_once()

    async def test_preferences_are_merged(self, mock_uow, mock_profile_repo):
        profile = BusinessProfile(
            account_id="acct_1",
            name="Kofi Prints",
            preferences={"default_currency": "GHS", "default_tax_rate": "15", "invoice_prefix": "KP-", "auto_save": True},
        )
        mock_profile_repo.get = AsyncMock(return_value=profile)

        result = await UpdateBusinessProfile(mock_uow, mock_profile_repo).execute(
            "acct_1",
            UpdateBusinessProfileCommandDTO(preferences=PreferencesDTO(default_tax_rate=Decimal("12.5"))),
        )

        preferences = result.value.preferences
        assert preferences.default_tax_rate == Decimal("12.5")
        assert preferences.invoice_prefix == "KP-"
        assert preferences.auto_save is True
        assert result.value.name == "Kofi Prints"

    async def test_partial_preferences_keep_installation_defaults(self, mock_uow, mock_profile_repo):
        mock_profile_repo.get = AsyncMock(return_value=None)
        defaults = Preferences(default_currency="USD", default_tax_rate=Decimal("10"), invoice_prefix="INV-")

        result = await UpdateBusinessProfile(mock_uow, mock_profile_repo, defaults).execute(
            "acct_1",
            UpdateBusinessProfileCommandDTO(preferences=PreferencesDTO(invoice_prefix="KP-")),
        )

        saved = mock_profile_repo.save.call_args.args[0]
        assert saved.preferences == {"invoice_prefix": "KP-"}
        assert result.value.preferences.invoice_prefix == "KP-"
        assert result.value.preferences.default_currency == "USD"
        assert result.value.preferences.default_tax_rate == Decimal("10")

    async def test_store_failure(self, mock_uow, mock_profile_repo):
        mock_profile_repo.get = AsyncMock(return_value=None)
        mock_profile_repo.save = AsyncMock(side_effect=Exception("denied"))

        result = await UpdateBusinessProfile(mock_uow, mock_profile_repo).execute(
            "acct_1", UpdateBusinessProfileCommandDTO(name="X")
        )

        assert result.error.code == "UPDATE_PROFILE_FAILED"
        mock_uow.rollback.assert_called_once()
