"""Document loading for hyperdoc.

Supported sources
-----------------
- JSON text: :func:`parse_document`
- Local files: :func:`load_file`
- ``http://`` and ``https://`` URLs: :func:`fetch_document`, with retries on
  transport errors and 429/5xx responses

:func:`load_document` picks the right loader for a path or URL.
"""

from .loading import fetch_document, load_document, load_file, parse_document

__all__ = [
    "parse_document",
    "load_file",
    "fetch_document",
    "load_document",
]
