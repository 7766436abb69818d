import argparse
import json
import mimetypes
import sys
from pathlib import Path

from app.analysis.catalog import load_document_catalog
from app.config.settings import Settings
from app.imaging.exceptions import DecodeError
from app.logging.logger import Log
from app.processor.admission import validate_upload
from app.processor.exceptions import UploadValidationError
from app.processor.models import UploadedDocument
from app.processor.processor import build_inference, build_processor
from app.processor.result_serializer import ResultSerializer

EXIT_REJECTED = 2


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="docscreen",
        description="Screen a document image for signs of forgery.",
    )
    parser.add_argument("file", nargs="?", type=Path, help="image of the document")
    parser.add_argument("--type", dest="declared_type", help="declared document type")
    parser.add_argument(
        "--list-types",
        action="store_true",
        help="print supported document types and file limits, then exit",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> admit upload -> run pipeline -> print JSON."""
    args = _parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level, stream=sys.stderr)
    catalog = load_document_catalog(
        settings.document_types_path,
        max_file_size_bytes=settings.max_upload_bytes,
    )

    if args.list_types:
        print(json.dumps(catalog.describe(), indent=2))
        return 0
    if args.file is None or not args.file.is_file():
        Log.error(f"No document file uploaded: {args.file}")
        return EXIT_REJECTED

    mime_type, _ = mimetypes.guess_type(args.file.name)
    document = UploadedDocument(
        content=args.file.read_bytes(),
        mime_type=mime_type or "application/octet-stream",
        file_name=args.file.name,
    )
    processor = build_processor(settings, inference=build_inference(settings), catalog=catalog)
    try:
        declared_type = validate_upload(document, args.declared_type, catalog)
        result = processor.analyze(document, declared_type)
    except (DecodeError, UploadValidationError) as exc:
        Log.error(f"Rejected {document.file_name}: {exc}")
        return EXIT_REJECTED

    print(json.dumps(ResultSerializer().serialize(result), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
