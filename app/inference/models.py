from dataclasses import dataclass


@dataclass(frozen=True)
class Classification:
    """A document-type label predicted by the image classifier."""

    label: str
    confidence: float
