"""
Tests for translating sorts from serialized field names to property paths.
"""

from typing import Optional

import pytest
from pydantic import BaseModel

from sort_translator import Direction, NullHandling, Order, Sort, SortTranslator
from sort_translator.core.models import PersistentEntity, PersistentProperty
from sort_translator.query.sort_translator import decapitalize, normalize_segment, split_property_path
from sort_translator.schema import PydanticMappingProvider, PydanticMetadataProvider

from conftest import FakeMappingProvider, FakeMetadataProvider


class User:
    pass


class UserProfile:
    pass


class Owner:
    pass


profile = PersistentProperty(name="profile", type=UserProfile)
full_name = PersistentProperty(name="fullName", type=str)
owner = PersistentProperty(name="owner", type=Owner, is_association=True)
owner_id = PersistentProperty(name="id", type=str)
nick = PersistentProperty(name="nick", type=str)
code = PersistentProperty(name="code", type=str)

USER = PersistentEntity(
    type=User,
    properties={"profile": profile, "owner": owner, "nick": nick, "code": code},
)
PROFILE = PersistentEntity(type=UserProfile, properties={"fullName": full_name})
OWNER = PersistentEntity(type=Owner, properties={"id": owner_id})


@pytest.fixture
def fake_mappings():
    return FakeMappingProvider(
        flat={
            User: {"profile": profile, "owner": owner, "nickname": nick, "CODE": code},
            UserProfile: {"displayName": full_name},
            Owner: {"id": owner_id},
        },
        wrapped={
            User: {"userProfile": [profile], "alias": [nick]},
        },
    )


@pytest.fixture
def translator(fake_mappings):
    metadata = FakeMetadataProvider({User: USER, UserProfile: PROFILE, Owner: OWNER})
    return SortTranslator(metadata, fake_mappings)


def translated_properties(sort: Optional[Sort]):
    return None if sort is None else [order.property for order in sort]


@pytest.mark.parametrize(
    "path,segments",
    [
        ("fooBar.baz_qux", ["fooBar", "baz", "qux"]),
        ("name", ["name"]),
        ("a.b.c", ["a", "b", "c"]),
        ("a__b", ["a", "_b"]),
        ("a._b", ["a", "_b"]),
        ("trailing.", ["trailing"]),
        ("_leading", ["_leading"]),
        ("", []),
    ],
)
def test_split_property_path(path, segments):
    assert split_property_path(path) == segments


def test_decapitalize():
    assert decapitalize("FooBar") == "fooBar"
    assert decapitalize("fooBar") == "fooBar"
    assert decapitalize("URLPath") == "URLPath"
    assert decapitalize("A") == "a"
    assert decapitalize("") == ""


def test_normalize_segment_keeps_constant_style_names():
    assert normalize_segment("CODE") == "CODE"
    assert normalize_segment("MAX_VALUE_2") == "MAX_VALUE_2"
    assert normalize_segment("A$B") == "A$B"
    assert normalize_segment("Code") == "code"
    assert normalize_segment("DisplayName") == "displayName"


def test_unwrapped_segment_continues_into_nested_type(translator):
    result = translator.translate_sort(Sort.by(Order.asc("userProfile_displayName")), USER)

    assert result == Sort.by(Order(property="profile.fullName", direction=Direction.ASC))


def test_association_drops_only_clause(translator):
    assert translator.translate_sort(Sort.by(Order.asc("owner.id")), USER) is None
    assert translator.translate_sort(Sort.by(Order.asc("owner")), USER) is None


def test_flags_are_preserved_and_other_clauses_unaffected(translator):
    sort = Sort.by(
        Order.desc("owner.id"),
        Order(
            property="UserProfile.DisplayName",
            direction=Direction.DESC,
            null_handling=NullHandling.NULLS_FIRST,
            ignore_case=True,
        ),
        Order.asc("nickname"),
    )

    result = translator.translate_sort(sort, USER)

    assert list(result) == [
        Order(
            property="profile.fullName",
            direction=Direction.DESC,
            null_handling=NullHandling.NULLS_FIRST,
            ignore_case=True,
        ),
        Order(property="nick", direction=Direction.ASC),
    ]


def test_with_property_keeps_direction_and_flags():
    order = Order(property="lastName", direction=Direction.DESC, null_handling=NullHandling.NULLS_LAST).ignoring_case()

    moved = order.with_property("name.last_name")

    assert moved == Order(
        property="name.last_name",
        direction=Direction.DESC,
        null_handling=NullHandling.NULLS_LAST,
        ignore_case=True,
    )
    assert order.property == "lastName"


def test_constant_style_segment_is_matched_verbatim(translator):
    assert translated_properties(translator.translate_sort(Sort.by(Order.asc("CODE")), USER)) == ["code"]
    assert translator.translate_sort(Sort.by(Order.asc("Code")), USER) is None


def test_unknown_segment_drops_clause(translator):
    assert translator.translate_sort(Sort.by(Order.asc("missing")), USER) is None
    assert translator.translate_sort(Sort.by(Order.asc("userProfile.missing")), USER) is None


def test_unwrap_into_simple_value_only_resolves_as_last_segment(translator):
    assert translated_properties(translator.translate_sort(Sort.by(Order.asc("alias")), USER)) == ["nick"]
    assert translator.translate_sort(Sort.by(Order.asc("alias.more")), USER) is None


def test_segment_after_simple_value_drops_clause(translator):
    assert translator.translate_sort(Sort.by(Order.asc("userProfile_displayName_extra")), USER) is None


def test_all_dropped_returns_none_not_empty_sort(translator):
    sort = Sort.by(Order.asc("owner.id"), Order.asc("missing"), Order.asc("_"))

    assert translator.translate_sort(sort, USER) is None


def test_root_mappings_are_built_once_per_call(translator, fake_mappings):
    sort = Sort.by(
        Order.asc("nickname"),
        Order.asc("userProfile.displayName"),
        Order.asc("profile_displayName"),
    )

    result = translator.translate_sort(sort, USER)

    assert translated_properties(result) == ["nick", "profile.fullName", "profile.fullName"]
    assert fake_mappings.mapped_calls.count(User) == 1
    assert fake_mappings.wrapped_calls.count(User) == 1
    assert fake_mappings.mapped_calls.count(UserProfile) == 2


def test_input_is_not_modified(translator):
    sort = Sort.by(Order.asc("nickname"))

    translator.translate_sort(sort, USER)

    assert sort == Sort.by(Order.asc("nickname"))


def test_none_arguments_are_rejected(translator):
    with pytest.raises(ValueError, match="Sort must not be None"):
        translator.translate_sort(None, USER)
    with pytest.raises(ValueError, match="PersistentEntity must not be None"):
        translator.translate_sort(Sort.by(Order.asc("nickname")), None)


@pytest.mark.parametrize(
    "external,expected",
    [
        ("id", "id"),
        ("Id", "id"),
        ("birthDate", "birth_date"),
        ("first", "name.first_name"),
        ("last", "name.last_name"),
        ("name", "name"),
        ("name.first", "name.first_name"),
        ("userProfile_displayName", "profile.full_name"),
        ("userProfile.bio", "profile.bio"),
        ("address.streetName", "address.street_name"),
        ("address_zipCode", "address.zip_code"),
        ("previousAddresses", "previous_addresses"),
        ("tags", "tags"),
        ("owner", None),
        ("owner.username", None),
        ("previousAddresses.streetName", None),
        ("passwordHash", None),
        ("score", None),
        ("first.foo", None),
        ("profile", None),
        ("birth_date", None),
        ("address.street_name", None),
    ],
)
def test_translate_pydantic_model_fields(metadata_provider, mapping_provider, person_entity, external, expected):
    translator = SortTranslator(metadata_provider, mapping_provider)

    result = translator.translate_sort(Sort.by(Order.desc(external)), person_entity)

    if expected is None:
        assert result is None
    else:
        assert list(result) == [Order.desc(expected)]


class Inner(BaseModel):
    value: int


class Outer(BaseModel):
    inner: Inner
    count: int


@pytest.mark.parametrize("path", ["inner.value", "count", "inner"])
def test_canonical_paths_translate_to_themselves(path):
    metadata = PydanticMetadataProvider([Outer])
    translator = SortTranslator(metadata, PydanticMappingProvider(metadata))

    result = translator.translate_sort(Sort.by(Order.asc(path)), metadata.get_persistent_entity(Outer))

    assert translated_properties(result) == [path]
