"""
Go identifier rules for generated companion fields.

Each value becomes a field of the companion struct, so value names must
avoid Go keywords and the struct's own fields and methods.
"""

from typing import List

from ...core.naming import NameSanitizer

GO_RESERVED_WORDS = frozenset(
    """
    break case chan const continue default defer else fallthrough for func
    go goto if import interface map package range return select struct
    switch type var
    """.split()
)

# Members of the generated companion struct
GO_COMPANION_MEMBERS = frozenset(
    {"Err", "errf", "parseMap", "Values", "Parse", "ParseFrom", "Is", "IsFrom"}
)


def create_go_sanitizer() -> NameSanitizer:
    return NameSanitizer(set(GO_RESERVED_WORDS), set(GO_COMPANION_MEMBERS))


def validate_go_package_name(name: str) -> List[str]:
    """
    Check a package clause name.

    Returns:
        Problems found (empty if the name is usable)
    """
    if not name:
        return ["Package name cannot be empty"]

    problems = []
    if not name.isidentifier():
        problems.append(f"'{name}' is not a valid Go identifier")
    if name != name.lower():
        problems.append("Package names should be lowercase")
    if name in GO_RESERVED_WORDS:
        problems.append(f"'{name}' is a Go reserved word")
    return problems
