from app.analysis.metadata_analyzer import MetadataAnalyzer
from app.analysis.models import FindingFactory, FindingType, Severity
from app.imaging.models import ImageMetadata


def _metadata(
    width: int = 1200,
    height: int = 900,
    color_space: str | None = "srgb",
    density: float | None = 300.0,
    has_alpha: bool = False,
    size_bytes: int = 500_000,
) -> ImageMetadata:
    return ImageMetadata(
        width=width,
        height=height,
        format="jpeg",
        color_space=color_space,
        density=density,
        has_alpha=has_alpha,
        size_bytes=size_bytes,
    )


def _types(metadata: ImageMetadata) -> list[FindingType]:
    return [f.type for f in MetadataAnalyzer().analyze(metadata)]


class TestCleanImage:
    def test_no_findings(self) -> None:
        assert MetadataAnalyzer().analyze(_metadata()) == []


class TestIndividualChecks:
    def test_low_resolution_width(self) -> None:
        findings = MetadataAnalyzer().analyze(_metadata(width=199, size_bytes=10**6))
        assert [f.type for f in findings] == [FindingType.LOW_RESOLUTION]
        assert findings[0].severity is Severity.MEDIUM
        assert findings[0].score == 15
        assert "199x900" in findings[0].detail

    def test_low_resolution_height(self) -> None:
        assert _types(_metadata(height=150, size_bytes=10**6)) == [FindingType.LOW_RESOLUTION]

    def test_exactly_200_is_not_low_resolution(self) -> None:
        assert _types(_metadata(width=200, height=200, size_bytes=10**6)) == []

    def test_unusual_color_space(self) -> None:
        findings = MetadataAnalyzer().analyze(_metadata(color_space="b-w"))
        assert [f.type for f in findings] == [FindingType.UNUSUAL_COLOR_SPACE]
        assert findings[0].severity is Severity.LOW
        assert findings[0].score == 5

    def test_expected_color_spaces_are_case_insensitive(self) -> None:
        for space in ("srgb", "RGB", "cmyk"):
            assert _types(_metadata(color_space=space)) == []

    def test_missing_color_space_is_ignored(self) -> None:
        assert _types(_metadata(color_space=None)) == []

    def test_high_compression(self) -> None:
        # 1200 * 900 * 0.1 = 108000 bytes is the boundary
        findings = MetadataAnalyzer().analyze(_metadata(size_bytes=107_999))
        assert [f.type for f in findings] == [FindingType.HIGH_COMPRESSION]
        assert findings[0].score == 10

    def test_compression_at_boundary_is_not_flagged(self) -> None:
        assert _types(_metadata(size_bytes=108_000)) == []

    def test_alpha_channel(self) -> None:
        findings = MetadataAnalyzer().analyze(_metadata(has_alpha=True))
        assert [f.type for f in findings] == [FindingType.ALPHA_CHANNEL]
        assert findings[0].score == 8

    def test_low_dpi(self) -> None:
        findings = MetadataAnalyzer().analyze(_metadata(density=71))
        assert [f.type for f in findings] == [FindingType.LOW_DPI]
        assert findings[0].severity is Severity.MEDIUM
        assert findings[0].score == 12

    def test_missing_dpi_is_ignored(self) -> None:
        assert _types(_metadata(density=None)) == []


class TestCombinedChecks:
    def test_all_checks_fire_independently(self) -> None:
        metadata = _metadata(
            width=100,
            height=100,
            color_space="lab",
            density=50,
            has_alpha=True,
            size_bytes=100,
        )
        findings = MetadataAnalyzer().analyze(metadata)
        assert [f.type for f in findings] == [
            FindingType.LOW_RESOLUTION,
            FindingType.UNUSUAL_COLOR_SPACE,
            FindingType.HIGH_COMPRESSION,
            FindingType.ALPHA_CHANNEL,
            FindingType.LOW_DPI,
        ]
        assert sum(f.score for f in findings) == 15 + 5 + 10 + 8 + 12

    def test_uses_configured_scores(self) -> None:
        analyzer = MetadataAnalyzer(FindingFactory({FindingType.ALPHA_CHANNEL: 3}))
        findings = analyzer.analyze(_metadata(has_alpha=True))
        assert findings[0].score == 3
