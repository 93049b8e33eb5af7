"""
Codec adapters between companion values and serialization formats.

Every decoder extracts a bare string from its envelope and hands it to
``Companion.parse``; parse errors propagate unchanged.
"""

import json
import xml.etree.ElementTree as ET
from typing import Any, TypeVar

import yaml

from .errors import NotAStringError, NullValueError
from .matcher import Companion

E = TypeVar("E")

_KEPT_TAGS = ("tag:yaml.org,2002:null", "tag:yaml.org,2002:merge")


class TextLoader(yaml.SafeLoader):
    """SafeLoader that keeps scalars as written: ``on``, ``010`` and ``1.5`` stay text."""


TextLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag in _KEPT_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


# JSON


def to_json(companion: Companion[E], item: E) -> str:
    """Encode a value as a JSON string document."""
    return json.dumps(companion.serialize(item))


def from_json(companion: Companion[E], data: str | bytes) -> E:
    """Decode a JSON string document into a value."""
    decoded = json.loads(data)
    if not isinstance(decoded, str):
        raise NotAStringError(companion.type_name, decoded)
    return companion.parse(decoded)


# YAML


def to_yaml(companion: Companion[E], item: E) -> str:
    """Encode a value as a YAML scalar document."""
    return yaml.safe_dump(companion.serialize(item), default_flow_style=True)


def from_yaml(companion: Companion[E], document: str | bytes) -> E:
    """Decode a YAML scalar document into a value."""
    decoded = yaml.load(document, Loader=TextLoader)
    if not isinstance(decoded, str):
        raise NotAStringError(companion.type_name, decoded)
    return companion.parse(decoded)


# XML


def to_xml_element(companion: Companion[E], item: E, tag: str) -> ET.Element:
    """Encode a value as the character data of a new element."""
    element = ET.Element(tag)
    element.text = companion.serialize(item)
    return element


def from_xml_element(companion: Companion[E], element: ET.Element) -> E:
    """Decode the character data of an element."""
    return companion.parse("".join(element.itertext()))


def to_xml(companion: Companion[E], item: E, tag: str) -> str:
    """Encode a value as a serialized XML element."""
    return ET.tostring(to_xml_element(companion, item, tag), encoding="unicode")


def from_xml(companion: Companion[E], data: str | bytes) -> E:
    """Decode a serialized XML element."""
    return from_xml_element(companion, ET.fromstring(data))


# Relational driver values


def to_db_value(companion: Companion[E], item: E) -> str:
    """Return the value to hand to a database driver."""
    return companion.serialize(item)


def from_db_value(companion: Companion[E], value: Any) -> E:
    """
    Decode a value read from a database driver.

    Raises:
        NullValueError: If the column was NULL
        NotAStringError: If the value cannot be turned into text
        UnrecognizedValueError: If the text matches no value
    """
    if value is None:
        raise NullValueError(companion.type_name)

    return companion.parse(_coerce_text(companion, value))


def _coerce_text(companion: Companion, value: Any) -> str:
    if isinstance(value, str):
        return value

    if isinstance(value, (bytes, bytearray, memoryview)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError:
            raise NotAStringError(companion.type_name, value) from None

    if isinstance(value, bool):
        return "true" if value else "false"

    if isinstance(value, (int, float)):
        return str(value)

    raise NotAStringError(companion.type_name, value)
