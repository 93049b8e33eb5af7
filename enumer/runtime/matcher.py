"""
Companion matcher for generated enumerations.

A companion owns the ordered universe of an enumeration's values together
with every spelling each value accepts, and answers parse/match questions
about arbitrary text. Matching is case-insensitive.
"""

from dataclasses import dataclass
from typing import Any, Dict, Generic, Hashable, Iterable, List, Sequence, Tuple, TypeVar

from .errors import UnrecognizedValueError

E = TypeVar("E", bound=Hashable)


def fold_case(text: str) -> str:
    """Normalize text for case-insensitive comparison."""
    return text.lower()


@dataclass(frozen=True)
class CompanionEntry(Generic[E]):
    """One member of a companion's universe."""

    item: E
    serialized: str
    aliases: Tuple[str, ...]
    keys: frozenset


class Companion(Generic[E]):
    """Parse and match text against a fixed, ordered set of values."""

    def __init__(
        self,
        type_name: str,
        entries: Iterable[Tuple[E, str, Iterable[str]]],
    ):
        """
        Build a companion.

        Args:
            type_name: Name of the enumeration, used in error messages
            entries: ``(item, serialized, aliases)`` triples in declaration
                order. The serialized form is always accepted, whether or
                not it is repeated in ``aliases``.
        """
        self.type_name = type_name
        self._entries: Dict[E, CompanionEntry[E]] = {}

        for item, serialized, aliases in entries:
            if item in self._entries:
                raise ValueError(f"{type_name}: duplicate companion entry {item!r}")

            ordered: List[str] = []
            for alias in (serialized, *aliases):
                if alias not in ordered:
                    ordered.append(alias)

            self._entries[item] = CompanionEntry(
                item=item,
                serialized=serialized,
                aliases=tuple(ordered),
                keys=frozenset(fold_case(alias) for alias in ordered),
            )

        self._universe: Tuple[E, ...] = tuple(self._entries)

    def __repr__(self) -> str:
        return f"Companion({self.type_name!r}, {len(self._universe)} values)"

    def __len__(self) -> int:
        return len(self._universe)

    def __iter__(self):
        return iter(self._universe)

    def __contains__(self, text: object) -> bool:
        return isinstance(text, str) and self.is_(text)

    def values(self) -> List[E]:
        """Return every value in declaration order."""
        return list(self._universe)

    def serialize(self, item: E) -> str:
        """Return the canonical serialized form of a value."""
        return self._entry(item).serialized

    def aliases_of(self, item: E) -> Tuple[str, ...]:
        """Return every spelling a value accepts, canonical form first."""
        return self._entry(item).aliases

    def parse_from(self, text: str, *candidates: E) -> E:
        """
        Match text against the given candidates only.

        Candidates are tried in the order given and the first whose aliases
        contain ``text`` (ignoring case) wins.

        Raises:
            UnrecognizedValueError: If no candidate matches.
        """
        key = fold_case(text) if isinstance(text, str) else None

        if key is not None:
            for candidate in candidates:
                entry = self._entries.get(candidate)
                if entry is not None and key in entry.keys:
                    return entry.item

        raise self.unrecognized(text, candidates)

    def parse(self, text: str) -> E:
        """Match text against every value of the enumeration."""
        return self.parse_from(text, *self._universe)

    def is_from(self, text: str, *candidates: E) -> bool:
        """Return True if ``parse_from`` would succeed."""
        try:
            self.parse_from(text, *candidates)
        except UnrecognizedValueError:
            return False
        return True

    def is_(self, text: str) -> bool:
        """Return True if ``parse`` would succeed."""
        return self.is_from(text, *self._universe)

    def unrecognized(self, text: Any, candidates: Sequence[E]) -> UnrecognizedValueError:
        """Build the error reported when ``text`` matches none of ``candidates``."""
        valid = [
            self._entries[candidate].serialized
            for candidate in candidates
            if candidate in self._entries
        ]
        return UnrecognizedValueError(self.type_name, text, valid)

    def _entry(self, item: E) -> CompanionEntry[E]:
        try:
            return self._entries[item]
        except KeyError:
            raise self.unrecognized(item, self._universe) from None


def build_companion(definition) -> "Companion":
    """
    Build a companion over the values of a resolved enumeration definition.

    Args:
        definition: An ``EnumDefinition`` (anything with ``type_name`` and
            ``values`` whose items expose ``serialized`` and ``aliases``)

    Returns:
        Companion whose items are the definition's resolved values
    """
    return Companion(
        definition.type_name,
        ((value, value.serialized, value.aliases) for value in definition.values),
    )
