from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    max_upload_bytes: int = 10 * 1024 * 1024

    normalized_max_dimension: int = 1024
    normalized_jpeg_quality: int = 85

    visual_working_size: int = 512
    uniformity_ratio_threshold: float = 0.25
    edge_variance_threshold: float = 2000.0
    noise_variance_threshold: float = 50.0
    finding_score_overrides: dict[str, int] = {}

    document_types_path: Path | None = None

    inference_provider: str = "huggingface"
    huggingface_api_token: str = ""
    huggingface_classification_model: str = "microsoft/dit-base-finetuned-rvlcdip"
    huggingface_captioning_model: str = "Salesforce/blip-image-captioning-large"
    huggingface_timeout_seconds: int = 30

    text_fraud_provider: str = "huggingface"
    text_fraud_api_key: str = ""
    text_fraud_base_url: str = ""
    text_fraud_model_name: str = "Qwen/Qwen2.5-7B-Instruct"
    text_fraud_temperature: float = 0.3
    text_fraud_max_tokens: int = 300
    text_fraud_timeout_seconds: int = 30
