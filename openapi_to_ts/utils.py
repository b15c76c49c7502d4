"""
Utility functions for versions and schema loading.
"""

import json
import re
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)

_LEADING_DIGIT = re.compile(r"^\d")
_MINOR_RELEASE = re.compile(r"^v\d+\.\d+$")


class SchemaLoadError(Exception):
    """Raised when the OpenAPI document cannot be loaded."""

    pass


def normalize_version(version: str) -> str:
    """Prefix a bare version number with "v".

    Examples:
        "1.16" -> "v1.16"
        "v1.16.2" -> "v1.16.2"
        "master" -> "master"
    """
    if _LEADING_DIGIT.match(version):
        return f"v{version}"
    return version


def release_tag(version: str) -> str:
    """Turn a normalized version into the git tag the schema is fetched from.

    Examples:
        "v1.16" -> "v1.16.0"
        "v1.16.2" -> "v1.16.2"
    """
    if _MINOR_RELEASE.match(version):
        return f"{version}.0"
    return version


def schema_url(template: str, version: str) -> str:
    """Format the schema URL template for a normalized version."""
    return template.format(version=release_tag(version))


def load_schema_from_file(file_path: str | Path) -> dict[str, Any]:
    """Load an OpenAPI document from a local JSON file.

    Raises:
        SchemaLoadError: If the file is missing, unreadable or not valid JSON.
    """
    file_path = Path(file_path)
    logger.debug("Loading schema from file: %s", file_path)

    if not file_path.exists():
        logger.error("File not found: %s", file_path)
        raise SchemaLoadError(f"File not found: {file_path}")

    try:
        with file_path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in file %s: %s", file_path, e)
        raise SchemaLoadError(f"Invalid JSON in file {file_path}: {e}") from e
    except OSError as e:
        logger.error("Error reading file %s: %s", file_path, e)
        raise SchemaLoadError(f"Error reading file {file_path}: {e}") from e


def load_schema_from_url(url: str, timeout: int = 30) -> dict[str, Any]:
    """Fetch an OpenAPI document over HTTP.

    Args:
        url: URL of the swagger.json document.
        timeout: Request timeout in seconds.

    Raises:
        SchemaLoadError: If the URL is invalid, the request fails, or the
            response isn't valid JSON.
    """
    logger.debug("Fetching schema from URL: %s", url)

    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error("Invalid URL format: %s", url)
        raise SchemaLoadError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        return response.json()
    except requests.exceptions.Timeout as e:
        logger.error("Request timeout for URL: %s", url)
        raise SchemaLoadError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error("Connection error for URL %s: %s", url, e)
        raise SchemaLoadError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error("HTTP error %s for URL: %s", e.response.status_code, url)
        raise SchemaLoadError(f"HTTP error {e.response.status_code} for URL: {url}") from e
    except ValueError as e:
        logger.error("Invalid JSON response from URL %s: %s", url, e)
        raise SchemaLoadError(f"Invalid JSON response from URL {url}: {e}") from e
    except requests.exceptions.RequestException as e:
        logger.error("Request error for URL %s: %s", url, e)
        raise SchemaLoadError(f"Request error for URL {url}: {e}") from e
