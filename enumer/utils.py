"""Utility functions for loading enumeration documents.

This module provides functions for loading ``*.enum.yaml`` documents from
files and URLs with proper error handling and validation.
"""

from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests
import yaml

from .codegen.core.schema import EnumSpecDocument, SpecFormatError
from .logging_config import get_logger
from .runtime.codecs import TextLoader

logger = get_logger(__name__)

SPEC_SUFFIXES = (".enum.yaml", ".enum.yml")


class SpecLoaderError(Exception):
    """Custom exception for document loading errors."""

    pass


def _parse_document(text: str, source: str, input_path: str | None = None) -> EnumSpecDocument:
    """Parse YAML text into an enumeration document."""
    try:
        data: Any = yaml.load(text, Loader=TextLoader)
    except yaml.YAMLError as e:
        logger.error("Invalid YAML in %s: %s", source, e)
        raise SpecLoaderError(f"Invalid YAML in {source}: {e}") from e

    if data is None:
        data = {}

    try:
        return EnumSpecDocument.from_dict(data, input_path=input_path)
    except SpecFormatError as e:
        raise SpecLoaderError(f"Invalid enumeration document {source}: {e}") from e


def _read_header_from(document: EnumSpecDocument, base_dir: Path | None) -> None:
    """Load ``header-from`` lines so that resolution needs no I/O."""
    if not document.header_from:
        return

    header_path = Path(document.header_from)
    if not header_path.is_absolute() and base_dir is not None:
        header_path = base_dir / header_path

    if not header_path.exists():
        raise SpecLoaderError(f"Invalid header-from path {header_path}: file not found")

    try:
        text = header_path.read_text(encoding="utf-8")
    except OSError as e:
        raise SpecLoaderError(f"Can't read header-from path {header_path}: {e}") from e

    document.header_lines = text.rstrip("\n").split("\n")
    logger.debug("Loaded %d header lines from %s", len(document.header_lines), header_path)


def load_spec_from_file(file_path: str | Path) -> EnumSpecDocument:
    """Load an enumeration document from a local file.

    Args:
        file_path: Path to the ``*.enum.yaml`` file.

    Returns:
        Parsed document with ``input_path`` set to the absolute path.

    Raises:
        SpecLoaderError: If the path is misnamed or missing, or the document is invalid.
    """
    file_path = Path(file_path).absolute()
    logger.debug("Attempting to load enumeration document: %s", file_path)

    if not file_path.name.lower().endswith(SPEC_SUFFIXES):
        logger.error("Not an enumeration document: %s", file_path)
        raise SpecLoaderError(f"{file_path} must be a .enum.yaml file")

    if not file_path.exists():
        logger.error("File not found: %s", file_path)
        raise SpecLoaderError(f"Invalid config path {file_path}: file not found")

    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Error reading file %s: %s", file_path, e, exc_info=True)
        raise SpecLoaderError(f"Can't load config path {file_path}: {e}") from e

    document = _parse_document(text, str(file_path), input_path=str(file_path))
    _read_header_from(document, file_path.parent)

    if document.output_path and not Path(document.output_path).is_absolute():
        document.output_path = str(file_path.parent / document.output_path)

    logger.info("Loaded enumeration document %s with %d values", file_path, len(document.values))
    return document


def load_spec_from_url(url: str, timeout: int = 30) -> EnumSpecDocument:
    """Load an enumeration document from a URL.

    Args:
        url: URL to fetch the YAML document from.
        timeout: Request timeout in seconds.

    Returns:
        Parsed document (without an input path).

    Raises:
        SpecLoaderError: If URL is invalid, request fails, or the document is invalid.
    """
    logger.debug("Attempting to load enumeration document from URL: %s", url)

    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error("Invalid URL format: %s", url)
        raise SpecLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        logger.error("Request timeout for URL: %s", url)
        raise SpecLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error("Connection error for URL %s: %s", url, e)
        raise SpecLoaderError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error("HTTP error %s for URL: %s", e.response.status_code, url)
        raise SpecLoaderError(f"HTTP error {e.response.status_code} for URL: {url}") from e
    except requests.exceptions.RequestException as e:
        logger.error("Request error for URL %s: %s", url, e, exc_info=True)
        raise SpecLoaderError(f"Request error for URL {url}: {e}") from e

    document = _parse_document(response.text, url)
    _read_header_from(document, None)

    logger.info("Loaded enumeration document from %s", url)
    return document


def load_spec(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> EnumSpecDocument:
    """Load an enumeration document from either a file or URL.

    Args:
        file_path: Path to a local document (mutually exclusive with url).
        url: URL to fetch the document from (mutually exclusive with file_path).
        timeout: Request timeout in seconds (only used for URLs).

    Raises:
        SpecLoaderError: If neither or both sources are given, or loading fails.
    """
    if not file_path and not url:
        logger.error("Neither file_path nor url provided")
        raise SpecLoaderError("Either file_path or url must be provided")

    if file_path and url:
        logger.error("Both file_path and url provided")
        raise SpecLoaderError("Cannot specify both file_path and url")

    if file_path:
        return load_spec_from_file(file_path)
    return load_spec_from_url(url, timeout)
