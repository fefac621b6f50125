"""Tests for app name validation and quoting helpers."""

import pytest

from taco.core.string_utils import (
    invalid_app_name_characters,
    is_valid_cordova_app_name,
    quotes_around_if_necessary,
)


@pytest.mark.parametrize("name", ["HelloCordova", "My App", "Café 2", "app-name_1.0"])
def test_valid_app_names(name: str) -> None:
    assert is_valid_cordova_app_name(name)


@pytest.mark.parametrize(
    "name", ['Say "hi"', "Cost$", "Tom & Jerry", "a/b", "<app>", "back\\slash", "tab\there"]
)
def test_invalid_app_names(name: str) -> None:
    assert not is_valid_cordova_app_name(name)


def test_invalid_app_name_characters_lists_printable_forbidden_chars() -> None:
    assert invalid_app_name_characters() == ['"', "$", "&", "/", "<", "\\"]


def test_quotes_around_if_necessary_leaves_plain_strings() -> None:
    assert quotes_around_if_necessary("cordova") == "cordova"


def test_quotes_around_if_necessary_quotes_and_escapes() -> None:
    assert quotes_around_if_necessary("My App") == '"My App"'
    assert quotes_around_if_necessary('say "hi" now') == '"say \\"hi\\" now"'
