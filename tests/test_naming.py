import pytest

from genbuilder.codegen.core.errors import InvalidIdentifier
from genbuilder.codegen.core.naming import (
    builder_type_name,
    constructor_name,
    getter_name,
    is_identifier,
    receiver_name,
    setter_name,
    to_private,
    to_public,
)


def test_to_public_upper_cases_first_character_only():
    assert to_public("integer32") == "Integer32"
    assert to_public("fooBar") == "FooBar"
    assert to_public("Already") == "Already"
    assert to_public("x") == "X"


def test_to_private_lower_cases_first_character_only():
    assert to_private("JasonBuilder") == "jasonBuilder"
    assert to_private("URL") == "uRL"
    assert to_private("t") == "t"


@pytest.mark.parametrize("func", [to_public, to_private, receiver_name])
def test_empty_name_is_rejected(func):
    with pytest.raises(InvalidIdentifier):
        func("")


def test_uncasable_first_character_is_rejected():
    # "ß".upper() is "SS"
    with pytest.raises(InvalidIdentifier):
        to_public("ßeta")


def test_derived_names():
    assert builder_type_name("jason") == "JasonBuilder"
    assert builder_type_name("Jason") == "JasonBuilder"
    assert constructor_name("JasonBuilder") == "NewJasonBuilder"
    assert constructor_name("jason") == "NewJason"
    assert setter_name("integer32") == "SetInteger32"
    assert getter_name("integer32") == "Integer32"


def test_receiver_name_is_lower_cased_first_letter():
    assert receiver_name("JasonBuilder") == "j"
    assert receiver_name("jason") == "j"
    assert receiver_name("Point") == "p"


def test_identifier_helpers():
    assert is_identifier("count")
    assert not is_identifier("")
    assert not is_identifier("9lives")
    assert not is_identifier("has-dash")
