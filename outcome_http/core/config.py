from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # Base for problem `type` URIs, e.g. "https://errors.example.com/".
    # "about:blank" means problems are untyped.
    PROBLEM_TYPE_BASE_URI: str = "about:blank"

    # Incoming header carrying the per-request correlation id.
    TRACE_ID_HEADER: str = "X-Request-Id"

    # Comma-separated allowed origins, or "*" to allow all.
    # Example: "https://myapp.com,https://api.myapp.com"
    CORS_ORIGINS: str = "*"

    @field_validator("PROBLEM_TYPE_BASE_URI", "TRACE_ID_HEADER")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must be a non-empty string")
        return v.strip()

    @property
    def cors_origins_list(self) -> list[str]:
        if self.CORS_ORIGINS.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()
