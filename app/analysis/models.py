from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class FindingType(str, Enum):
    LOW_RESOLUTION = "LOW_RESOLUTION"
    UNUSUAL_COLOR_SPACE = "UNUSUAL_COLOR_SPACE"
    HIGH_COMPRESSION = "HIGH_COMPRESSION"
    ALPHA_CHANNEL = "ALPHA_CHANNEL"
    LOW_DPI = "LOW_DPI"
    UNIFORM_COLOR_REGION = "UNIFORM_COLOR_REGION"
    EDGE_INCONSISTENCY = "EDGE_INCONSISTENCY"
    NOISE_INCONSISTENCY = "NOISE_INCONSISTENCY"
    DOCUMENT_TYPE_MISMATCH = "DOCUMENT_TYPE_MISMATCH"


class RiskLevel(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


SEVERITIES: Mapping[FindingType, Severity] = MappingProxyType({
    FindingType.LOW_RESOLUTION: Severity.MEDIUM,
    FindingType.UNUSUAL_COLOR_SPACE: Severity.LOW,
    FindingType.HIGH_COMPRESSION: Severity.MEDIUM,
    FindingType.ALPHA_CHANNEL: Severity.LOW,
    FindingType.LOW_DPI: Severity.MEDIUM,
    FindingType.UNIFORM_COLOR_REGION: Severity.MEDIUM,
    FindingType.EDGE_INCONSISTENCY: Severity.LOW,
    FindingType.NOISE_INCONSISTENCY: Severity.HIGH,
    FindingType.DOCUMENT_TYPE_MISMATCH: Severity.HIGH,
})

DEFAULT_SCORES: Mapping[FindingType, int] = MappingProxyType({
    FindingType.LOW_RESOLUTION: 15,
    FindingType.UNUSUAL_COLOR_SPACE: 5,
    FindingType.HIGH_COMPRESSION: 10,
    FindingType.ALPHA_CHANNEL: 8,
    FindingType.LOW_DPI: 12,
    FindingType.UNIFORM_COLOR_REGION: 15,
    FindingType.EDGE_INCONSISTENCY: 8,
    FindingType.NOISE_INCONSISTENCY: 20,
    FindingType.DOCUMENT_TYPE_MISMATCH: 25,
})


@dataclass(frozen=True)
class Finding:
    """One scored observation about a document."""

    type: FindingType
    severity: Severity
    detail: str
    score: int


class FindingFactory:
    """Builds findings with the configured score for each finding type."""

    def __init__(self, scores: Mapping[FindingType, int] | None = None) -> None:
        self._scores = dict(DEFAULT_SCORES)
        if scores:
            self._scores.update(scores)

    def make(self, finding_type: FindingType, detail: str) -> Finding:
        return Finding(
            type=finding_type,
            severity=SEVERITIES[finding_type],
            detail=detail,
            score=self._scores[finding_type],
        )


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of one screening run. Never persisted."""

    file_name: str
    file_size: int
    declared_type: str
    overall_risk_score: int
    risk_level: RiskLevel
    findings: tuple[Finding, ...] = ()
    ai_analysis: Mapping[str, object] = field(default_factory=dict)
    recommendations: tuple[str, ...] = ()
    analyzed_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    @property
    def finding_types(self) -> frozenset[FindingType]:
        return frozenset(f.type for f in self.findings)
