"""
Python-specific naming utilities and sanitization.

Handles Python reserved words and the attributes of the generated enum
class that member names must not shadow.
"""

import keyword

from ...core.naming import NameSanitizer


# Python reserved keywords
PYTHON_RESERVED_WORDS = set(keyword.kwlist) | set(keyword.softkwlist)

# Attributes of the generated enum class
PYTHON_ENUM_MEMBERS = {
    "name",
    "value",
    "mro",
    "parse",
    "parse_from",
    "is_",
    "is_from",
    "to_json",
    "from_json",
    "to_yaml",
    "from_yaml",
    "to_xml",
    "from_xml",
    "to_db_value",
    "from_db_value",
}


def create_python_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Python enum members."""
    return NameSanitizer(PYTHON_RESERVED_WORDS, PYTHON_ENUM_MEMBERS)


def sanitize_member_name(name: str, sanitizer: NameSanitizer = None) -> str:
    """Sanitize a name for use as an enum member."""
    sanitizer = sanitizer or create_python_sanitizer()
    # Enum reserves _sunder_ names; __private names are mangled in the class body.
    if name.startswith("__") or (name.startswith("_") and name.endswith("_")):
        name = f"V{name}"
    return sanitizer.sanitize_name(name)
