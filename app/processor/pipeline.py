from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterable

from app.analysis.models import Finding, RiskLevel
from app.imaging.models import ImageMetadata, NormalizedImage
from app.processor.models import UploadedDocument


@dataclass(slots=True)
class PipelineContext:
    document: UploadedDocument
    declared_type: str
    normalized_image: NormalizedImage | None = None
    metadata: ImageMetadata | None = None
    findings: tuple[Finding, ...] = ()
    ai_analysis: dict[str, object] = field(default_factory=dict)
    overall_risk_score: int = 0
    risk_level: RiskLevel = RiskLevel.LOW
    recommendations: tuple[str, ...] = ()

    def add_findings(self, findings: Iterable[Finding]) -> None:
        """Append findings; earlier ones are never replaced or reordered."""
        self.findings = (*self.findings, *findings)


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
