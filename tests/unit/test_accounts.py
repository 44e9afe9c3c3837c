import pytest

from backend.core.exceptions import NotFoundError


@pytest.mark.asyncio
async def test_missing_account_is_not_found(account_service, caller):
    with pytest.raises(NotFoundError):
        await account_service.get_profile(caller)


@pytest.mark.asyncio
async def test_update_merges_changes(account_service, profiles, caller):
    profiles.documents["user-1"] = {"email": "ada@example.com", "college": "X"}

    updated = await account_service.update_profile(caller, {"college": "Y", "phone": "5551234567"})

    assert updated == {"email": "ada@example.com", "college": "Y", "phone": "5551234567"}


@pytest.mark.asyncio
async def test_update_keeps_locked_immutable_field(account_service, profiles, caller):
    profiles.documents["user-1"] = {"prn": "123456"}

    updated = await account_service.update_profile(caller, {"prn": "654321"})

    assert updated == {"prn": "123456"}
    assert profiles.merges == []


@pytest.mark.asyncio
async def test_update_creates_profile_for_new_caller(account_service, caller):
    updated = await account_service.update_profile(caller, {"prn": "123456"})

    assert updated == {"prn": "123456"}
