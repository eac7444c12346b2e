from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    gcp_project_id: str = "your-project-id"
    gcp_location: str = "us-central1"

    text_model_name: str = "gemini-pro"
    vision_model_name: str = "gemini-pro-vision"

    generation_provider: str = "vertex"

    openai_api_key: str = ""
    openai_base_url: str = ""
    openai_timeout_seconds: int = 30

    transcription_provider: str = "google"
    speech_sample_rate_hertz: int = 16000

    max_file_size_mb: float | None = None
