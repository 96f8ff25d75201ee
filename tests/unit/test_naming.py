"""Tests for filename to identifier naming."""

from pathlib import Path

import pytest

from fontenum.core.exceptions import (
    DuplicateIdentifierError,
    EmptyIdentifierError,
    InvalidArgumentsError,
)
from fontenum.core.naming import (
    FontCase,
    base_name,
    check_unique,
    find_duplicates,
    font_case,
    identifier_name,
)


def test_base_name_strips_directories_and_extension():
    """Test base_name drops the directory and the final extension."""
    assert base_name("/fonts/Roboto-Bold.ttf") == "Roboto-Bold"
    assert base_name(Path("Open Sans.otf")) == "Open Sans"


def test_base_name_strips_only_final_extension():
    """Test base_name keeps inner dots."""
    assert base_name("Font.v2.ttf") == "Font.v2"


def test_base_name_without_extension():
    """Test base_name on a name with no dot."""
    assert base_name("fonts/Roboto") == "Roboto"


@pytest.mark.parametrize("path", ["", "/", "fonts/", "..", "."])
def test_base_name_rejects_paths_without_filename(path):
    """Test unparseable paths raise InvalidArgumentsError."""
    with pytest.raises(InvalidArgumentsError):
        base_name(path)


def test_identifier_name_removes_hyphens_and_spaces():
    """Test identifier_name strips separators and lowercases the first letter."""
    assert identifier_name("Roboto-Bold") == "robotoBold"
    assert identifier_name("Open Sans") == "openSans"
    assert identifier_name("Source Code - Pro-Light Italic") == "sourceCodeProLightItalic"


def test_identifier_name_keeps_rest_unchanged():
    """Test only the first character changes case."""
    assert identifier_name("SFProDisplay") == "sFProDisplay"
    assert identifier_name("already_lower") == "already_lower"


@pytest.mark.parametrize(
    "name", ["A-B C", "--x--", "Font Name-Bold", "Ünïcode Font", "9-Digits"]
)
def test_identifier_name_properties(name):
    """Test identifiers have no separators and a lowercase first character."""
    identifier = identifier_name(name)
    assert "-" not in identifier
    assert " " not in identifier
    assert identifier[0] == identifier[0].lower()


def test_identifier_name_empty():
    """Test a name made only of separators gives an empty identifier."""
    assert identifier_name("- -") == ""


def test_font_case():
    """Test font_case derives identifier and raw value."""
    case = font_case("/a/b/Roboto-Bold.ttf")
    assert case.identifier_name == "robotoBold"
    assert case.raw_value == "Roboto-Bold"
    assert case.source == Path("/a/b/Roboto-Bold.ttf")


@pytest.mark.parametrize("path", ["-.ttf", "fonts/ - .otf", ".ttf"])
def test_font_case_rejects_empty_identifier(path):
    """Test filenames without identifier characters are rejected."""
    with pytest.raises(EmptyIdentifierError):
        font_case(path)


def test_find_duplicates():
    """Test colliding identifiers are reported with their sources."""
    cases = [font_case("Foo-Bar.ttf"), font_case("FooBar.otf"), font_case("Baz.ttf")]
    duplicates = find_duplicates(cases)
    assert duplicates == {"fooBar": [Path("Foo-Bar.ttf"), Path("FooBar.otf")]}


def test_check_unique_raises_with_sources():
    """Test check_unique lists every colliding file."""
    cases = [font_case("Foo-Bar.ttf"), font_case("FooBar.otf")]
    with pytest.raises(DuplicateIdentifierError) as excinfo:
        check_unique(cases)
    message = str(excinfo.value)
    assert "fooBar" in message
    assert "Foo-Bar.ttf" in message
    assert "FooBar.otf" in message


def test_check_unique_passes():
    """Test distinct identifiers pass."""
    check_unique([FontCase("a", "A"), FontCase("b", "B")])
