from pathlib import Path

from app.inference.exceptions import InferenceError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the text-fraud prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled text_fraud_prompt.txt.

    Returns:
        The raw template with ``{document_type}`` and ``{extracted_text}`` placeholders.

    Raises:
        InferenceError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "text_fraud_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise InferenceError(f"Failed to load prompt template: {exc}") from exc
