"""Fixture pipeline configuration loaded from environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings


class FixturesConfig(BaseSettings):
    """Fixture pipeline configuration loaded from environment variables.

    Settings are loaded from environment variables with sensible defaults.
    For local development, create a .env file in the project root.
    Command-line flags override the matching settings for a single run.
    """

    # CSV input
    input_encoding: str = Field(
        default="utf-8-sig",
        description="Text encoding of the CSV and template files (utf-8-sig drops a byte-order mark)",
    )
    csv_delimiter: str = Field(
        default=",",
        min_length=1,
        max_length=1,
        description="Field delimiter of the fixtures CSV file",
    )
    csv_has_header: bool = Field(
        default=False,
        description="Skip the first CSV row as a header row",
    )

    # Rendering
    template_autoescape: bool = Field(
        default=True,
        description="HTML-escape values substituted into the template",
    )

    # Logging
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format (for production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = {
        "env_prefix": "TGFC_",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


# Singleton pattern
_config: FixturesConfig | None = None


def get_config() -> FixturesConfig:
    """Get the fixture pipeline configuration singleton.

    Returns:
        FixturesConfig: Pipeline configuration instance
    """
    global _config
    if _config is None:
        _config = FixturesConfig()
    return _config
