from pydantic_settings import BaseSettings, SettingsConfigDict

from pricetag.inference.model_client import GenerationConfig


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore", protected_namespaces=("settings_",)
    )

    # Keys must be provided via env / .env (never hardcode secrets in code)
    model_provider: str = "gemini"  # gemini | openai
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-2.0-flash"
    openai_api_key: str | None = None
    openai_model: str = "gpt-4o-mini"

    # Generation parameters sent with every analysis request
    temperature: float = 0.1
    top_p: float = 0.95
    top_k: int = 40
    max_output_tokens: int = 8192
    request_timeout: float | None = None

    langsmith_api_key: str | None = None
    langsmith_project: str | None = None
    langchain_tracing_v2: bool = False

    aws_region: str = "us-east-1"
    secrets_manager_secret_name: str | None = None

    log_level: str = "INFO"

    @property
    def active_api_key(self) -> str | None:
        if self.model_provider == "openai":
            return self.openai_api_key
        return self.gemini_api_key

    @property
    def active_model(self) -> str:
        if self.model_provider == "openai":
            return self.openai_model
        return self.gemini_model

    def generation_config(self) -> GenerationConfig:
        return GenerationConfig(
            temperature=self.temperature,
            top_p=self.top_p,
            top_k=self.top_k,
            max_output_tokens=self.max_output_tokens,
        )
