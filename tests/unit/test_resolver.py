import pytest

from backend.models import SelectFieldDescriptor, TextFieldDescriptor
from backend.registration import FieldResolver


@pytest.mark.asyncio
async def test_empty_required_list_skips_profile_store(catalog, profiles, caller):
    resolver = FieldResolver(catalog, profiles)

    store = await resolver.resolve("open-talk", [], caller)

    assert store.event_id == "open-talk"
    assert store.fields == []
    assert profiles.reads == 0
    assert profiles.merges == []


@pytest.mark.asyncio
async def test_missing_profile_is_created_from_identity(catalog, profiles, caller):
    resolver = FieldResolver(catalog, profiles)

    store = await resolver.resolve("hackathon", ["college", "year"], caller)

    assert profiles.documents["user-1"] == {
        "email": "ada@example.com",
        "displayName": "Ada Lovelace",
        "photoURL": "https://example.com/ada.png",
    }
    assert [field.value for field in store.fields] == ["", ""]


@pytest.mark.asyncio
async def test_existing_profile_is_not_rewritten(catalog, profiles, caller):
    profiles.documents["user-1"] = {"email": "ada@example.com", "college": "MIT"}
    resolver = FieldResolver(catalog, profiles)

    store = await resolver.resolve("hackathon", ["college"], caller)

    assert profiles.merges == []
    assert store.fields[0].value == "MIT"


@pytest.mark.asyncio
async def test_descriptors_follow_required_order_and_type(catalog, profiles, caller):
    profiles.documents["user-1"] = {"year": "2"}
    resolver = FieldResolver(catalog, profiles)

    store = await resolver.resolve("hackathon", ["year", "tshirtSize", "college"], caller)

    assert [field.name for field in store.fields] == ["year", "tshirtSize", "college"]
    year, tshirt, college = store.fields
    assert isinstance(year, SelectFieldDescriptor)
    assert year.options == ("1", "2", "3", "4")
    assert year.value == "2"
    assert isinstance(tshirt, TextFieldDescriptor)
    assert tshirt.label == tshirt.placeholder == "tshirtSize"
    assert tshirt.mutable is True
    assert tshirt.regex == ".+"
    assert isinstance(college, TextFieldDescriptor)
    assert all(field.event_id == "hackathon" for field in store.fields)


@pytest.mark.asyncio
async def test_descriptor_serializes_with_camel_case_keys(catalog, profiles, caller):
    resolver = FieldResolver(catalog, profiles)

    store = await resolver.resolve("hackathon", ["prn", "year"], caller)
    payload = store.model_dump(by_alias=True)

    assert payload["eventId"] == "hackathon"
    prn, year = payload["fields"]
    assert prn == {
        "type": "text",
        "name": "prn",
        "label": "PRN",
        "placeholder": "PRN",
        "mutable": False,
        "regex": r"^[0-9]{6}$",
        "value": "",
        "eventId": "hackathon",
    }
    assert "placeholder" not in year
    assert "regex" not in year
    assert year["options"] == ("1", "2", "3", "4")


def test_describe_stringifies_stored_values(catalog):
    descriptor = FieldResolver.describe(catalog.definition_for("year"), "hackathon", {"year": 3})

    assert descriptor.value == "3"
