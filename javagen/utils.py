"""Reading model documents from files, URLs and streams.

A model document is JSON holding one class object or a list of them. This
module only fetches and parses the text and checks that top-level shape;
:mod:`javagen.codegen.loader` interprets the contents.
"""

import json
import sys
from pathlib import Path
from typing import Any, TextIO
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)


class ModelSourceError(Exception):
    """Raised when a model document cannot be read or is not class-shaped."""

    pass


def parse_model_document(text: str, source: str) -> Any:
    """Parse JSON text and check it holds a class object or a list of them.

    Args:
        text: Raw document text.
        source: Where the text came from, used in error messages.

    Returns:
        The parsed document.

    Raises:
        ModelSourceError: If the text is not JSON or has the wrong shape.
    """
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise ModelSourceError(f"Invalid JSON in {source}: {e}") from e

    classes = document if isinstance(document, list) else [document]
    if not classes:
        raise ModelSourceError(f"No classes in {source}")
    for index, entry in enumerate(classes):
        if not isinstance(entry, dict):
            raise ModelSourceError(
                f"Class entry {index} in {source} is {type(entry).__name__}, not an object"
            )

    logger.debug(f"Parsed {len(classes)} class model(s) from {source}")
    return document


def _read_file(path: Path) -> str:
    if not path.exists():
        raise ModelSourceError(f"File not found: {path}")
    if path.suffix.lower() != ".json":
        logger.warning(f"Model file does not have .json extension: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise ModelSourceError(f"Error reading file {path}: {e}") from e


def _fetch(url: str, timeout: int) -> str:
    parsed_url = urlparse(url)
    if not (parsed_url.scheme and parsed_url.netloc):
        raise ModelSourceError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        raise ModelSourceError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        raise ModelSourceError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        raise ModelSourceError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        raise ModelSourceError(f"Request error for URL {url}: {e}") from e

    return response.text


def read_model_document(
    file_path: str | Path | None = None,
    url: str | None = None,
    stream: TextIO | None = None,
    timeout: int = 30,
) -> tuple[str, Any]:
    """Read a model document from exactly one source.

    Args:
        file_path: Local JSON file.
        url: HTTP(S) address of a JSON document.
        stream: Open text stream, e.g. ``sys.stdin``.
        timeout: Request timeout in seconds (URLs only).

    Returns:
        Tuple of (source description, parsed document).

    Raises:
        ModelSourceError: If zero or several sources are given, or reading fails.
    """
    given = [source for source in (file_path, url, stream) if source is not None]
    if len(given) != 1:
        raise ModelSourceError("Exactly one of file_path, url or stream must be provided")

    if file_path is not None:
        source, text = str(file_path), _read_file(Path(file_path))
    elif url is not None:
        source, text = url, _fetch(url, timeout)
    else:
        source = "<stdin>" if stream is sys.stdin else getattr(stream, "name", "<stream>")
        text = stream.read()

    logger.info(f"Loaded model document from {source}")
    return source, parse_model_document(text, source)
