"""Boundary checks applied before a document enters the pipeline."""

from app.analysis.catalog import UNKNOWN_DOCUMENT_TYPE, DocumentCatalog
from app.processor.exceptions import UploadValidationError
from app.processor.models import UploadedDocument


def validate_upload(
    document: UploadedDocument,
    declared_type: str | None,
    catalog: DocumentCatalog,
) -> str:
    """Admit an upload and return its effective declared type.

    A missing or blank declared type becomes ``"unknown"``.

    Raises:
        UploadValidationError: on empty, oversized or unsupported uploads,
            or on a declared type the catalog does not know.
    """
    if document.size_bytes == 0:
        raise UploadValidationError("No document file uploaded")
    if document.size_bytes > catalog.max_file_size_bytes:
        raise UploadValidationError(
            f"File too large: {document.size_bytes} bytes "
            f"(max {catalog.max_file_size_bytes})"
        )
    mime_type = document.mime_type.lower()
    if mime_type not in catalog.mime_types:
        supported = ", ".join(f.name for f in catalog.file_types)
        raise UploadValidationError(
            f"Invalid file type '{document.mime_type}'. Only {supported} are allowed."
        )

    effective = (declared_type or "").strip() or UNKNOWN_DOCUMENT_TYPE
    if effective != UNKNOWN_DOCUMENT_TYPE and catalog.find(effective) is None:
        raise UploadValidationError(f"Unsupported document type '{effective}'")
    return effective
