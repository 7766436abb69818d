from typing import ClassVar, Iterable

from app.analysis.models import Finding, FindingType, RiskLevel


class RecommendationGenerator:
    """Turns a risk tier and the findings present into advisory strings.

    Order: tier guidance, then one advisory per finding type in the order the
    types were first found, then the closing disclaimer.
    """

    TIER_GUIDANCE: ClassVar[dict[RiskLevel, tuple[str, ...]]] = {
        RiskLevel.HIGH: (
            "This document shows multiple fraud indicators. Manual verification "
            "by an expert is strongly recommended.",
            "Cross-reference the document details with the issuing institution directly.",
            "Contact the educational institution or issuing authority to verify authenticity.",
        ),
        RiskLevel.MEDIUM: (
            "Some suspicious indicators were found. Additional verification is recommended.",
            "Compare this document with known authentic samples from the same institution.",
        ),
        RiskLevel.LOW: (
            "No major fraud indicators detected. Standard verification procedures "
            "should still be followed.",
        ),
    }

    FINDING_ADVICE: ClassVar[dict[FindingType, str]] = {
        FindingType.LOW_RESOLUTION: (
            "Request a higher resolution scan of the document for better analysis."
        ),
        FindingType.NOISE_INCONSISTENCY: (
            "The document shows signs of digital manipulation. Request the original "
            "physical document for inspection."
        ),
        FindingType.DOCUMENT_TYPE_MISMATCH: (
            "The document does not appear to match the declared document type. "
            "Verify the correct document was uploaded."
        ),
    }

    DISCLAIMER: ClassVar[str] = (
        "AI-based fraud detection is a screening tool. Always follow your "
        "organization's standard verification procedures."
    )

    def generate(self, risk_level: RiskLevel, findings: Iterable[Finding]) -> list[str]:
        recommendations: list[str] = list(self.TIER_GUIDANCE[risk_level])
        for finding in findings:
            advice = self.FINDING_ADVICE.get(finding.type)
            if advice is not None and advice not in recommendations:
                recommendations.append(advice)
        recommendations.append(self.DISCLAIMER)
        return recommendations
