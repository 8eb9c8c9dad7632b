"""Tests for string helpers used by code generation."""

import pytest

from capsulekit.core.strings import (
    RGB,
    capitalize,
    escape_string,
    format_number,
    generate_id,
    hex_to_rgb,
    split_pinned,
    to_camel_case,
    to_identifier,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
)


class TestToIdentifier:
    def test_strips_spaces_and_punctuation(self) -> None:
        assert to_identifier("My App Name") == "MyAppName"
        assert to_identifier("Tasks & Notes!") == "TasksNotes"

    def test_prefixes_leading_digit(self) -> None:
        assert to_identifier("123start") == "_123start"

    def test_empty_input(self) -> None:
        assert to_identifier("") == ""
        assert to_identifier("!!!") == ""


class TestCaseConversion:
    def test_camel_case(self) -> None:
        assert to_camel_case("hello world") == "helloWorld"
        assert to_camel_case("HELLO WORLD") == "helloWorld"

    def test_pascal_case(self) -> None:
        assert to_pascal_case("my app name") == "MyAppName"
        assert to_pascal_case("text_secondary".replace("_", " ")) == "TextSecondary"

    def test_snake_case(self) -> None:
        assert to_snake_case("My App Name") == "my_app_name"

    def test_kebab_case(self) -> None:
        assert to_kebab_case("My App Name") == "my-app-name"

    def test_punctuation_is_dropped(self) -> None:
        assert to_kebab_case("Task Board (beta)") == "task-board-beta"

    def test_capitalize_keeps_rest(self) -> None:
        assert capitalize("iPhone") == "IPhone"
        assert capitalize("") == ""


class TestEscapeString:
    def test_escapes_quotes_and_backslashes(self) -> None:
        assert escape_string('say "hi"') == 'say \\"hi\\"'
        assert escape_string("C:\\path") == "C:\\\\path"

    def test_escapes_control_characters(self) -> None:
        assert escape_string("a\nb\tc\rd") == "a\\nb\\tc\\rd"

    def test_plain_text_unchanged(self) -> None:
        assert escape_string("plain") == "plain"


class TestHexToRgb:
    def test_with_hash(self) -> None:
        assert hex_to_rgb("#3B82F6") == RGB(59, 130, 246)

    def test_without_hash(self) -> None:
        assert hex_to_rgb("ff0000") == RGB(255, 0, 0)

    @pytest.mark.parametrize("value", ["#fff", "red", "rgba(0,0,0,1)", "#12345", ""])
    def test_invalid_returns_none(self, value: str) -> None:
        assert hex_to_rgb(value) is None


class TestSplitPinned:
    def test_npm_with_version(self) -> None:
        assert split_pinned("lucide-react:^0.300.0", ":") == ("lucide-react", "^0.300.0")

    def test_npm_without_version(self) -> None:
        assert split_pinned("clsx", ":") == ("clsx", None)

    def test_scoped_npm_name(self) -> None:
        assert split_pinned("@tanstack/react-query:^5.0.0", ":") == (
            "@tanstack/react-query",
            "^5.0.0",
        )
        assert split_pinned("@tanstack/react-query", ":") == ("@tanstack/react-query", None)

    def test_swift_package_url(self) -> None:
        assert split_pinned("https://github.com/airbnb/lottie-ios@4.4.0", "@") == (
            "https://github.com/airbnb/lottie-ios",
            "4.4.0",
        )
        assert split_pinned("https://github.com/airbnb/lottie-ios", "@") == (
            "https://github.com/airbnb/lottie-ios",
            None,
        )


class TestMisc:
    def test_format_number(self) -> None:
        assert format_number(2.0) == "2"
        assert format_number(0.5) == "0.5"
        assert format_number(42) == "42"

    def test_generate_id(self) -> None:
        value = generate_id()
        assert len(value) == 7
        assert value.isalnum()
        assert len(generate_id(12)) == 12
