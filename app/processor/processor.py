from app.analysis.catalog import UNKNOWN_DOCUMENT_TYPE, DocumentCatalog, load_document_catalog
from app.analysis.metadata_analyzer import MetadataAnalyzer
from app.analysis.models import AnalysisResult, FindingFactory, FindingType
from app.analysis.recommendations import RecommendationGenerator
from app.analysis.type_matcher import DocumentTypeMatcher
from app.analysis.visual_detector import VisualAnomalyDetector, VisualThresholds
from app.config.settings import Settings
from app.imaging.normalizer import ImageNormalizer
from app.inference.base import BaseInferenceAdapter
from app.inference.exceptions import CollaboratorUnavailableError
from app.inference.factory import InferenceAdapterFactory
from app.logging.logger import Log
from app.processor.models import UploadedDocument
from app.processor.pipeline import PipelineContext, PipelineStep
from app.processor.steps import (
    AggregateRiskStep,
    AiInferenceStep,
    MetadataAnalysisStep,
    NormalizeImageStep,
    RecommendationStep,
    VisualAnomalyStep,
)


class Processor:
    """Runs the screening pipeline for one document at a time.

    Pipeline: normalize -> metadata -> visual -> AI inference -> risk -> recommendations.
    Holds no per-request state, so one instance can serve every request.
    """

    def __init__(self, steps: list[PipelineStep]) -> None:
        self._steps = steps

    def analyze(
        self,
        document: UploadedDocument,
        declared_type: str | None = None,
    ) -> AnalysisResult:
        """Screen a document and return its scored result.

        Raises:
            DecodeError: if the upload cannot be decoded; no partial result is produced.
        """
        Log.info(
            f"Analyzing document {document.file_name} ({document.size_bytes / 1024:.1f}KB)"
        )
        context = PipelineContext(
            document=document,
            declared_type=declared_type or UNKNOWN_DOCUMENT_TYPE,
        )
        try:
            for step in self._steps:
                context = step.run(context)
        except Exception as exc:
            Log.error(f"Analysis of {document.file_name} failed: {exc}")
            raise

        Log.info(
            f"Analysis complete. Risk: {context.risk_level.value} "
            f"({context.overall_risk_score}/100)"
        )
        return AnalysisResult(
            file_name=document.file_name,
            file_size=document.size_bytes,
            declared_type=context.declared_type,
            overall_risk_score=context.overall_risk_score,
            risk_level=context.risk_level,
            findings=context.findings,
            ai_analysis=dict(context.ai_analysis),
            recommendations=context.recommendations,
        )


def build_inference(settings: Settings) -> BaseInferenceAdapter | None:
    """Build the inference adapter, or None when no credential is configured."""
    try:
        return InferenceAdapterFactory.create(settings)
    except CollaboratorUnavailableError as exc:
        Log.warning(str(exc))
        return None


def build_processor(
    settings: Settings,
    inference: BaseInferenceAdapter | None = None,
    catalog: DocumentCatalog | None = None,
) -> Processor:
    """Build a Processor with all analyzers wired from settings.

    ``inference`` is used as given; pass ``build_inference(settings)`` to use
    the configured provider, or None to run without AI analysis.
    """
    if catalog is None:
        catalog = load_document_catalog(
            settings.document_types_path,
            max_file_size_bytes=settings.max_upload_bytes,
        )
    findings = FindingFactory(
        {FindingType(name): score for name, score in settings.finding_score_overrides.items()}
    )
    steps: list[PipelineStep] = [
        NormalizeImageStep(
            ImageNormalizer(
                max_dimension=settings.normalized_max_dimension,
                quality=settings.normalized_jpeg_quality,
            )
        ),
        MetadataAnalysisStep(MetadataAnalyzer(findings)),
        VisualAnomalyStep(
            VisualAnomalyDetector(
                thresholds=VisualThresholds(
                    uniformity_ratio=settings.uniformity_ratio_threshold,
                    edge_variance=settings.edge_variance_threshold,
                    noise_variance=settings.noise_variance_threshold,
                ),
                working_size=settings.visual_working_size,
                findings=findings,
            )
        ),
        AiInferenceStep(inference, DocumentTypeMatcher(catalog, findings)),
        AggregateRiskStep(),
        RecommendationStep(RecommendationGenerator()),
    ]
    return Processor(steps=steps)
