from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Analysis
    analysis_max_workers: int = 1  # >1 analyses batch responses on a thread pool

    # Logging
    log_level: str = "INFO"
    log_json: bool = False  # set True in production for structured JSON logs
    log_analysis_debug: bool = False  # per-response DEBUG lines from the analysis steps


settings = Settings()


def validate_settings(current: Settings | None = None) -> None:
    """Validate settings. Called by the embedding service on startup."""
    current = current or settings
    errors: list[str] = []

    if current.analysis_max_workers < 1:
        errors.append("ANALYSIS_MAX_WORKERS must be at least 1")

    if current.log_level.upper() not in _LOG_LEVELS:
        errors.append(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}")

    if errors:
        raise SystemExit("Configuration errors:\n  - " + "\n  - ".join(errors))
