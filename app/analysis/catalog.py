"""Supported declared document types and their classifier keyword sets."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from app.analysis.exceptions import CatalogError

_DEFAULT_CATALOG_PATH = Path(__file__).parent / "document_types.json"

UNKNOWN_DOCUMENT_TYPE = "unknown"


@dataclass(frozen=True)
class DocumentType:
    value: str
    label: str
    keywords: tuple[str, ...]


@dataclass(frozen=True)
class FileType:
    name: str
    mime_type: str


@dataclass(frozen=True)
class DocumentCatalog:
    """Static configuration surface: what may be uploaded and claimed."""

    document_types: tuple[DocumentType, ...]
    file_types: tuple[FileType, ...]
    max_file_size_bytes: int

    def find(self, value: str) -> DocumentType | None:
        for document_type in self.document_types:
            if document_type.value == value:
                return document_type
        return None

    def keywords_for(self, value: str) -> tuple[str, ...]:
        document_type = self.find(value)
        return document_type.keywords if document_type else ()

    @property
    def mime_types(self) -> frozenset[str]:
        return frozenset(f.mime_type for f in self.file_types)

    def describe(self) -> dict[str, object]:
        """Read-only payload listing supported types and limits."""
        return {
            "documentTypes": [
                {"value": t.value, "label": t.label, "keywords": list(t.keywords)}
                for t in self.document_types
            ],
            "supportedFileTypes": [f.name for f in self.file_types],
            "maxFileSize": f"{self.max_file_size_bytes // (1024 * 1024)}MB",
        }


def load_document_catalog(
    path: Path | None = None,
    max_file_size_bytes: int = 10 * 1024 * 1024,
) -> DocumentCatalog:
    """Load the catalog from a JSON file.

    Args:
        path: Path to the catalog file.
              Defaults to the bundled document_types.json.
        max_file_size_bytes: Upload size limit reported by the catalog.

    Raises:
        CatalogError: if the file cannot be read or has the wrong shape.
    """
    if path is None:
        path = _DEFAULT_CATALOG_PATH
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise CatalogError(f"Failed to load document catalog: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Invalid document catalog JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise CatalogError("Document catalog must be an object")
    return DocumentCatalog(
        document_types=tuple(_build_document_type(item) for item in _list(raw, "documentTypes")),
        file_types=tuple(_build_file_type(item) for item in _list(raw, "supportedFileTypes")),
        max_file_size_bytes=max_file_size_bytes,
    )


def _list(raw: dict[str, Any], key: str) -> list[Any]:
    value = raw.get(key)
    if not isinstance(value, list):
        raise CatalogError(f"'{key}' must be a list")
    return value


def _build_document_type(raw: Any) -> DocumentType:
    if not isinstance(raw, dict):
        raise CatalogError("Document type entries must be objects")
    value = raw.get("value")
    if not value or not isinstance(value, str):
        raise CatalogError("'value' must be a non-empty string")
    keywords = raw.get("keywords", [])
    if not isinstance(keywords, list) or not all(isinstance(k, str) for k in keywords):
        raise CatalogError(f"Document type '{value}': 'keywords' must be a list of strings")
    return DocumentType(
        value=value,
        label=str(raw.get("label") or value),
        keywords=tuple(k.lower() for k in keywords),
    )


def _build_file_type(raw: Any) -> FileType:
    if not isinstance(raw, dict):
        raise CatalogError("File type entries must be objects")
    name, mime_type = raw.get("name"), raw.get("mimeType")
    if not isinstance(name, str) or not isinstance(mime_type, str):
        raise CatalogError("File type entries need string 'name' and 'mimeType'")
    return FileType(name=name, mime_type=mime_type)
