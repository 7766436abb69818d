from typing import Callable, ClassVar, TypeVar

from app.analysis.metadata_analyzer import MetadataAnalyzer
from app.analysis.recommendations import RecommendationGenerator
from app.analysis.risk import aggregate_score, risk_level_for
from app.analysis.type_matcher import DocumentTypeMatcher
from app.analysis.visual_detector import VisualAnomalyDetector
from app.imaging.metadata_reader import read_image_metadata
from app.imaging.normalizer import ImageNormalizer
from app.inference.base import BaseInferenceAdapter
from app.logging.logger import Log
from app.processor.pipeline import PipelineContext, PipelineStep

T = TypeVar("T")


def _require_image(context: PipelineContext) -> bytes:
    if context.normalized_image is None:
        raise ValueError("PipelineContext.normalized_image must be set before analysis")
    return context.normalized_image.content


class NormalizeImageStep(PipelineStep):
    def __init__(self, normalizer: ImageNormalizer) -> None:
        self._normalizer = normalizer

    def run(self, context: PipelineContext) -> PipelineContext:
        context.normalized_image = self._normalizer.normalize(context.document.content)
        Log.info(
            f"Normalized {context.document.file_name} to "
            f"{context.normalized_image.width}x{context.normalized_image.height}"
        )
        return context


class MetadataAnalysisStep(PipelineStep):
    def __init__(self, analyzer: MetadataAnalyzer) -> None:
        self._analyzer = analyzer

    def run(self, context: PipelineContext) -> PipelineContext:
        metadata = read_image_metadata(context.document.content)
        context.metadata = metadata
        context.ai_analysis["imageMetadata"] = {
            "width": metadata.width,
            "height": metadata.height,
            "format": metadata.format,
            "colorSpace": metadata.color_space,
            "dpi": metadata.density if metadata.density else "unknown",
            "hasAlpha": metadata.has_alpha,
        }
        findings = self._analyzer.analyze(metadata)
        context.add_findings(findings)
        Log.info(f"Metadata analysis: {len(findings)} findings")
        return context


class VisualAnomalyStep(PipelineStep):
    def __init__(self, detector: VisualAnomalyDetector) -> None:
        self._detector = detector

    def run(self, context: PipelineContext) -> PipelineContext:
        findings = self._detector.analyze(_require_image(context))
        context.add_findings(findings)
        Log.info(f"Visual anomaly detection: {len(findings)} findings")
        return context


class AiInferenceStep(PipelineStep):
    """Classify -> extract text -> assess text, each capability optional."""

    UNCONFIGURED_NOTE: ClassVar[str] = (
        "Hugging Face API token not configured. Set HUGGINGFACE_API_TOKEN in .env "
        "for full AI analysis. Results are based on image metadata and visual "
        "analysis only."
    )
    PARTIAL_FAILURE_NOTE: ClassVar[str] = (
        "Some AI analysis features encountered errors. Their results are omitted "
        "and the score relies on image analysis for them."
    )
    MIN_TEXT_LENGTH: ClassVar[int] = 10
    MAX_CLASSIFICATIONS: ClassVar[int] = 5

    def __init__(
        self,
        inference: BaseInferenceAdapter | None,
        matcher: DocumentTypeMatcher,
    ) -> None:
        self._inference = inference
        self._matcher = matcher

    def run(self, context: PipelineContext) -> PipelineContext:
        if self._inference is None:
            context.ai_analysis["note"] = self.UNCONFIGURED_NOTE
            Log.warning("AI inference not configured, skipping AI analysis")
            return context

        image = _require_image(context)
        failed: list[str] = []

        classifications = self._attempt("classification", failed, self._inference.classify, image)
        if classifications is not None:
            context.ai_analysis["documentClassification"] = [
                {"label": c.label, "confidence": round(c.confidence, 4)}
                for c in classifications[: self.MAX_CLASSIFICATIONS]
            ]
            mismatch = self._matcher.check(classifications, context.declared_type)
            if mismatch is not None:
                context.add_findings([mismatch])

        text = self._attempt("text extraction", failed, self._inference.extract_text, image)
        if text is not None:
            context.ai_analysis["extractedText"] = text
            if len(text) > self.MIN_TEXT_LENGTH:
                narrative = self._attempt(
                    "text fraud assessment",
                    failed,
                    self._inference.assess_text_fraud,
                    text,
                    context.declared_type,
                )
                if narrative is not None:
                    context.ai_analysis["fraudAnalysis"] = narrative

        if failed:
            context.ai_analysis["note"] = self.PARTIAL_FAILURE_NOTE
        Log.info(f"AI inference finished, failed capabilities: {failed or 'none'}")
        return context

    @staticmethod
    def _attempt(
        capability: str,
        failed: list[str],
        call: Callable[..., T],
        *args: object,
    ) -> T | None:
        try:
            return call(*args)
        except Exception as exc:
            Log.warning(f"AI {capability} unavailable: {exc}")
            failed.append(capability)
            return None


class AggregateRiskStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.overall_risk_score = aggregate_score(context.findings)
        context.risk_level = risk_level_for(context.overall_risk_score)
        return context


class RecommendationStep(PipelineStep):
    def __init__(self, generator: RecommendationGenerator) -> None:
        self._generator = generator

    def run(self, context: PipelineContext) -> PipelineContext:
        context.recommendations = tuple(
            self._generator.generate(context.risk_level, context.findings)
        )
        return context
