from app.inference.base import BaseInferenceAdapter
from app.inference.factory import InferenceAdapterFactory
from app.inference.inference_adapter import HostedInferenceAdapter

__all__ = ["BaseInferenceAdapter", "HostedInferenceAdapter", "InferenceAdapterFactory"]
