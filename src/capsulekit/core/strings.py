"""
String utility functions for CapsuleKit.

Pure helpers shared by every platform compiler when emitting generated
source: identifier sanitising, case conversion, string-literal escaping,
hex color parsing and short id generation.
"""

from __future__ import annotations

import re
import secrets
import string
from typing import NamedTuple

_PUNCTUATION = re.compile(r"[^a-zA-Z0-9\s]")
_WHITESPACE = re.compile(r"\s+")
_HEX_COLOR = re.compile(r"#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")

_BASE36 = string.digits + string.ascii_lowercase

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


class RGB(NamedTuple):
    r: int
    g: int
    b: int


def _words(text: str) -> list[str]:
    return _WHITESPACE.split(_PUNCTUATION.sub("", text))


def to_identifier(name: str) -> str:
    """
    Convert a display name into a valid identifier.

    Strips punctuation and whitespace, and prefixes an underscore when the
    result would start with a digit.

    Examples:
        >>> to_identifier("My App Name")
        'MyAppName'
        >>> to_identifier("123start")
        '_123start'
    """
    ident = _WHITESPACE.sub("", _PUNCTUATION.sub("", name))
    if ident[:1].isdigit():
        return "_" + ident
    return ident


def capitalize(text: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    return text[:1].upper() + text[1:]


def to_camel_case(text: str) -> str:
    """
    Examples:
        >>> to_camel_case("HELLO WORLD")
        'helloWorld'
    """
    words = _words(text)
    return "".join(
        word.lower() if i == 0 else capitalize(word.lower()) for i, word in enumerate(words)
    )


def to_pascal_case(text: str) -> str:
    """
    Examples:
        >>> to_pascal_case("my app name")
        'MyAppName'
    """
    return "".join(capitalize(word.lower()) for word in _words(text))


def to_snake_case(text: str) -> str:
    """
    Examples:
        >>> to_snake_case("My App Name")
        'my_app_name'
    """
    return "_".join(_words(text)).lower()


def to_kebab_case(text: str) -> str:
    """
    Examples:
        >>> to_kebab_case("My App Name")
        'my-app-name'
    """
    return "-".join(_words(text)).lower()


def generate_id(length: int = 7) -> str:
    """Generate a short random base-36 id."""
    return "".join(secrets.choice(_BASE36) for _ in range(length))


def escape_string(text: str) -> str:
    """
    Escape text for use inside a double-quoted string literal.

    Handles backslash, double quote, newline, carriage return and tab,
    which covers TypeScript, Swift and Kotlin literals alike.
    """
    return "".join(_ESCAPES.get(ch, ch) for ch in text)


def hex_to_rgb(hex_color: str) -> RGB | None:
    """
    Parse a six digit hex color, with or without a leading '#'.

    Returns None for anything else (shorthand, named colors, rgba()...).
    """
    match = _HEX_COLOR.fullmatch(hex_color)
    if not match:
        return None
    r, g, b = (int(part, 16) for part in match.groups())
    return RGB(r, g, b)


def split_pinned(dependency: str, separator: str) -> tuple[str, str | None]:
    """
    Split a dependency identifier into name and optional pinned version.

    Only the last separator after the final '/' is considered, so scoped
    npm names ('@scope/pkg') and URLs keep their leading parts intact.

    Examples:
        >>> split_pinned("lucide-react:^0.300.0", ":")
        ('lucide-react', '^0.300.0')
        >>> split_pinned("https://github.com/airbnb/lottie-ios@4.4.0", "@")
        ('https://github.com/airbnb/lottie-ios', '4.4.0')
    """
    head, slash, tail = dependency.rpartition("/")
    name, sep, version = tail.rpartition(separator)
    if not sep or not name:
        return dependency, None
    return f"{head}{slash}{name}", version or None


def format_number(value: int | float) -> str:
    """
    Render a number as a source literal, dropping a redundant ``.0``.

    Examples:
        >>> format_number(2.0)
        '2'
        >>> format_number(0.5)
        '0.5'
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value)
