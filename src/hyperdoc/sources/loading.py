"""Load hypermedia documents from text, files and HTTP.

The document classes only ever see parsed JSON. This module turns the
different places a document can come from into a root
:class:`~hyperdoc.document.Resource`.

Example:
    root = load_document("https://api.example.com/employees/7")
    root = load_document("fixtures/employee.json")
"""

from __future__ import annotations

import json
import time
from pathlib import Path

import httpx
from loguru import logger

from ..core.config import HTTPConfig
from ..core.exceptions import DocumentFetchError, DocumentLoadError, ValidationError
from ..document.resource import Resource

# Status codes worth retrying
_RETRYABLE_STATUS = frozenset({429, 500, 502, 503, 504})


def parse_document(text: str, uri: str) -> Resource:
    """Parse JSON text into the root resource of a document.

    Args:
        text: JSON document.
        uri: URI the document was retrieved from.

    Returns:
        Resource wrapping the document's root object.

    Raises:
        DocumentLoadError: If the text is not JSON or its root is not an object.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentLoadError(uri, f"Invalid JSON: {e}") from e
    try:
        return Resource(data, uri)
    except ValidationError as e:
        raise DocumentLoadError(uri, str(e)) from e


def load_file(path: str | Path, uri: str | None = None) -> Resource:
    """Load a document from the local filesystem.

    Args:
        path: File to read (UTF-8).
        uri: URI of the document (default: the file's ``file://`` URI).

    Raises:
        DocumentLoadError: If the file cannot be read or parsed.
    """
    file_path = Path(path)
    source = uri or file_path.resolve().as_uri()
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentLoadError(str(file_path), str(e)) from e
    logger.debug(f"Loaded {len(text)} chars from {file_path}")
    return parse_document(text, source)


def fetch_document(
    url: str,
    config: HTTPConfig | None = None,
    client: httpx.Client | None = None,
) -> Resource:
    """Fetch a document over HTTP.

    Transport errors and 429/5xx responses are retried with exponential
    backoff, up to ``config.max_retries`` attempts.

    Args:
        url: Document URL.
        config: HTTP settings (default: ``HTTPConfig()``).
        client: Client to use instead of a new one.

    Returns:
        Root resource; its URI is the final URL after redirects.

    Raises:
        DocumentFetchError: If the document cannot be fetched.
        DocumentLoadError: If the response is not a JSON object.
    """
    config = config or HTTPConfig()
    headers = {"User-Agent": config.user_agent, "Accept": config.accept}
    owns_client = client is None
    if client is None:
        client = httpx.Client(
            timeout=config.timeout_seconds,
            follow_redirects=config.follow_redirects,
        )

    attempts = max(1, config.max_retries)
    try:
        for attempt in range(attempts):
            try:
                response = _get(client, url, headers)
            except DocumentFetchError as e:
                if not e.retryable or attempt == attempts - 1:
                    raise
                delay = 2**attempt * 0.5
                logger.warning(f"{e}; retrying in {delay:.1f}s ({attempt + 1}/{attempts})")
                time.sleep(delay)
                continue
            return parse_document(response.text, str(response.url))
    finally:
        if owns_client:
            client.close()
    # Unreachable: the loop either returns or raises
    raise DocumentFetchError(url, "No attempts made")


def _get(client: httpx.Client, url: str, headers: dict[str, str]) -> httpx.Response:
    logger.debug(f"GET {url}")
    try:
        response = client.get(url, headers=headers)
    except httpx.HTTPError as e:
        raise DocumentFetchError(url, f"Request failed: {e}", retryable=True) from e
    if response.status_code in _RETRYABLE_STATUS:
        raise DocumentFetchError(
            url, f"HTTP {response.status_code}", retryable=True
        )
    if response.is_error:
        raise DocumentFetchError(url, f"HTTP {response.status_code}")
    return response


def load_document(source: str | Path, config: HTTPConfig | None = None) -> Resource:
    """Load a document from an ``http(s)://`` URL or a file path."""
    if isinstance(source, str) and source.startswith(("http://", "https://")):
        return fetch_document(source, config)
    return load_file(source)
