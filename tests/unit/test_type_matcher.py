from app.analysis.catalog import load_document_catalog
from app.analysis.models import FindingType, Severity
from app.analysis.type_matcher import DocumentTypeMatcher
from app.inference.models import Classification


def _matcher() -> DocumentTypeMatcher:
    return DocumentTypeMatcher(load_document_catalog())


class TestMismatch:
    def test_confident_foreign_label_is_a_mismatch(self) -> None:
        finding = _matcher().check(
            [Classification("financial-report", 0.9)], "passport"
        )
        assert finding is not None
        assert finding.type is FindingType.DOCUMENT_TYPE_MISMATCH
        assert finding.severity is Severity.HIGH
        assert finding.score == 25
        assert '"financial-report" (90.0% confidence)' in finding.detail
        assert '"passport"' in finding.detail

    def test_low_confidence_is_not_a_mismatch(self) -> None:
        assert _matcher().check([Classification("financial-report", 0.4)], "passport") is None

    def test_confidence_of_exactly_half_is_not_a_mismatch(self) -> None:
        assert _matcher().check([Classification("financial-report", 0.5)], "passport") is None

    def test_uses_highest_confidence_label(self) -> None:
        classifications = [
            Classification("budget", 0.1),
            Classification("financial-report", 0.8),
        ]
        assert _matcher().check(classifications, "passport") is not None


class TestMatch:
    def test_keyword_substring_matches(self) -> None:
        assert _matcher().check([Classification("Letter", 0.95)], "offer_letter") is None

    def test_unknown_declared_type_is_skipped(self) -> None:
        assert _matcher().check([Classification("memo", 0.99)], "unknown") is None

    def test_type_without_keywords_is_skipped(self) -> None:
        assert _matcher().check([Classification("memo", 0.99)], "not_in_catalog") is None

    def test_empty_classification_is_skipped(self) -> None:
        assert _matcher().check([], "passport") is None
