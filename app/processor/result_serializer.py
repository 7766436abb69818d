from app.analysis.models import AnalysisResult, Finding


class ResultSerializer:
    """Converts an AnalysisResult to a JSON-serializable response payload."""

    def serialize(self, result: AnalysisResult) -> dict[str, object]:
        return {
            "fileName": result.file_name,
            "fileSize": result.file_size,
            "documentType": result.declared_type,
            "analysisTimestamp": result.analyzed_at,
            "overallRiskScore": result.overall_risk_score,
            "riskLevel": result.risk_level.value,
            "findings": [self._finding_to_dict(f) for f in result.findings],
            "aiAnalysis": dict(result.ai_analysis),
            "recommendations": list(result.recommendations),
        }

    def _finding_to_dict(self, finding: Finding) -> dict[str, object]:
        return {
            "type": finding.type.value,
            "severity": finding.severity.value,
            "detail": finding.detail,
            "score": finding.score,
        }
