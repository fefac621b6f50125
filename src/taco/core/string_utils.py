"""String helpers for app names and command lines."""

# Printable characters Cordova rejects in an app display name, keyed by code point
_INVALID_APP_NAME_CHARS: dict[int, str] = {
    34: '"',
    36: "$",
    38: "&",
    47: "/",
    60: "<",
    92: "\\",
}


def is_valid_cordova_app_name(name: str) -> bool:
    """Check that a display name has no characters Cordova forbids.

    Control characters (code points below 32) are always rejected.
    """
    for char in name:
        code = ord(char)
        if code < 32 or code in _INVALID_APP_NAME_CHARS:
            return False
    return True


def invalid_app_name_characters() -> list[str]:
    """Return the printable characters that must not appear in an app name."""
    return list(_INVALID_APP_NAME_CHARS.values())


def quotes_around_if_necessary(value: str) -> str:
    """Surround a string with double quotes if it contains spaces.

    Existing double quotes are backslash-escaped when quoting is applied.
    """
    if " " not in value:
        return value
    escaped = value.replace('"', '\\"')
    return f'"{escaped}"'
