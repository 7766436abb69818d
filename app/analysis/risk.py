from typing import Iterable

from app.analysis.models import Finding, RiskLevel

MAX_SCORE = 100
HIGH_RISK_THRESHOLD = 60
MEDIUM_RISK_THRESHOLD = 30


def aggregate_score(findings: Iterable[Finding]) -> int:
    """Sum of finding scores, clamped to ``MAX_SCORE``."""
    return min(MAX_SCORE, sum(f.score for f in findings))


def risk_level_for(score: int) -> RiskLevel:
    if score >= HIGH_RISK_THRESHOLD:
        return RiskLevel.HIGH
    if score >= MEDIUM_RISK_THRESHOLD:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW
