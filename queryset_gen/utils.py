"""Loading model descriptions produced by the struct scanner.

A description can come from a local file, a URL or an open stream. Whatever
the source, the text is parsed as JSON and converted into a validated
ModelDescription, so callers never handle the raw dict.
"""

import json
from pathlib import Path
from typing import TextIO
from urllib.parse import urlparse

import requests

from .codegen.core.schema import ModelDescription, convert_model_description
from .logging_config import get_logger

logger = get_logger(__name__)


class ModelLoaderError(Exception):
    """The model description could not be read or is not JSON."""

    pass


def read_model_file(file_path: str | Path) -> str:
    """Read a model description file.

    Raises:
        ModelLoaderError: If the file is missing or unreadable.
    """
    file_path = Path(file_path)
    if not file_path.is_file():
        logger.error("Model file not found: %s", file_path)
        raise ModelLoaderError(f"Model file not found: {file_path}")

    if file_path.suffix.lower() != ".json":
        # Scanners sometimes write .out or .txt; the content decides
        logger.warning("Model file does not have .json extension: %s", file_path)

    try:
        return file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error reading model file %s: %s", file_path, e)
        raise ModelLoaderError(f"Error reading model file {file_path}: {e}") from e


def fetch_model(url: str, timeout: int = 30) -> str:
    """Download a model description.

    Raises:
        ModelLoaderError: If the URL is invalid or the request fails.
    """
    parsed_url = urlparse(url)
    if parsed_url.scheme not in ("http", "https") or not parsed_url.netloc:
        raise ModelLoaderError(f"Invalid model URL: {url}")

    logger.debug("Fetching model description from %s", url)
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        raise ModelLoaderError(f"Timed out fetching model from {url}") from e
    except requests.exceptions.HTTPError as e:
        raise ModelLoaderError(
            f"HTTP error {e.response.status_code} fetching model from {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        logger.error("Request for %s failed: %s", url, e)
        raise ModelLoaderError(f"Cannot fetch model from {url}: {e}") from e

    content_type = response.headers.get("content-type", "").lower()
    if "json" not in content_type:
        logger.warning("Model URL %s answered with content type %r", url, content_type)
    return response.text


def parse_model_description(text: str, source: str) -> ModelDescription:
    """Parse JSON text into a validated ModelDescription.

    Raises:
        ModelLoaderError: If the text is not valid JSON.
        SchemaError: If the JSON does not describe model structs.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in %s: %s", source, e)
        raise ModelLoaderError(f"Invalid JSON in {source}: {e}") from e

    description = convert_model_description(data)
    logger.info("Loaded %d struct(s) from %s", len(description.schemas), source)
    return description


def load_model_description(
    file_path: str | Path | None = None,
    url: str | None = None,
    stream: TextIO | None = None,
    timeout: int = 30,
) -> ModelDescription:
    """Load a model description from exactly one of file_path, url or stream.

    Raises:
        ModelLoaderError: If not exactly one source is given, or reading fails.
        SchemaError: If the JSON does not describe model structs.
    """
    given = [s for s in (file_path, url, stream) if s is not None]
    if len(given) != 1:
        raise ModelLoaderError(
            "Exactly one of file_path, url or stream must be provided"
        )

    if file_path is not None:
        return parse_model_description(read_model_file(file_path), str(file_path))
    if url is not None:
        return parse_model_description(fetch_model(url, timeout), url)
    return parse_model_description(stream.read(), getattr(stream, "name", "<stream>"))
