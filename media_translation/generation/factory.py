from media_translation.config.settings import Settings
from media_translation.generation.base import BaseGenerativeClient
from media_translation.generation.example_client_adapter import ExampleGenerativeClient
from media_translation.generation.openai_client_adapter import OpenAIClientAdapter
from media_translation.generation.vertex_client_adapter import VertexClientAdapter


class GenerativeClientFactory:
    """Creates the configured generative model client."""

    SUPPORTED_PROVIDERS = ("vertex", "openai", "openai_compatible", "example")

    @classmethod
    def create(cls, settings: Settings) -> BaseGenerativeClient:
        """Create a configured client from application settings."""
        provider = settings.generation_provider.lower()
        if provider == "example":
            return ExampleGenerativeClient()
        if provider == "vertex":
            return VertexClientAdapter(
                project_id=settings.gcp_project_id,
                location=settings.gcp_location,
            )
        if provider in ("openai", "openai_compatible"):
            return OpenAIClientAdapter(
                api_key=settings.openai_api_key,
                timeout_seconds=settings.openai_timeout_seconds,
                base_url=cls._resolve_base_url(provider, settings),
            )
        raise ValueError(
            f"Unknown generation provider '{provider}'. Choose from: {list(cls.SUPPORTED_PROVIDERS)}"
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        url = settings.openai_base_url.strip()
        if not url:
            raise ValueError(
                "openai_base_url is required for generation_provider=openai_compatible"
            )
        return url
