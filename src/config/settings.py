"""
Configuration management for the CV generator and Mysolution application submitter.
"""
import json
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

from applicators.encoding import PLACEHOLDER_CV_BASE64
from applicators.exceptions import ConfigurationError

# Load environment variables
load_dotenv()


class ApiConfig(BaseModel):
    """Connection details for one Mysolution environment."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    base_url: str = Field(alias="baseUrl")
    client_id: str = Field("", alias="clientId")
    client_secret: str = Field("", alias="clientSecret")
    job_id: str = Field("", alias="jobId")

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    def require_credentials(self) -> "ApiConfig":
        """Fail fast when the client credentials are missing."""
        if not self.client_id or not self.client_secret:
            raise ConfigurationError("Mysolution API credentials are not set")
        return self


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Mysolution API
    mysolution_base_url: str = "https://base-select.my.salesforce.com"
    mysolution_client_id: str = ""
    mysolution_client_secret: str = ""
    mysolution_job_id: str = ""
    request_timeout_secs: int = 30

    # Application payload
    set_api_name: str = "jobbird"
    cv_file_path: str = "./testcv.pdf"
    cv_fallback: str = PLACEHOLDER_CV_BASE64

    # Empty string submits without a domain parameter
    sweep_domains: List[str] = ["", "jobbird", "default", "mysolution", "base-select"]

    # Document generation
    cv_output_path: str = "docs/lorem-ipsum-cv.pdf"

    # Logging
    log_level: str = "INFO"
    log_file: str = "./logs/mysolution_apply.log"
    submission_log_file: Optional[str] = "./logs/submissions.json"

    @field_validator("mysolution_client_secret", mode="before")
    @classmethod
    def _clean_client_secret(cls, v):
        """Strip quotes and whitespace left over from pasting the secret."""
        if isinstance(v, str):
            return v.strip().replace('"', '').replace("'", "")
        return v

    def api_config(self) -> ApiConfig:
        return ApiConfig(
            base_url=self.mysolution_base_url,
            client_id=self.mysolution_client_id,
            client_secret=self.mysolution_client_secret,
            job_id=self.mysolution_job_id,
        )


def load_api_config(path: Union[str, Path], defaults: Optional[ApiConfig] = None) -> ApiConfig:
    """Load an ApiConfig from a JSON file, falling back to ``defaults`` for absent keys."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Could not read configuration file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {path} must contain a JSON object")

    merged = defaults.model_dump(by_alias=True) if defaults else {}
    for key, value in data.items():
        # snake_case keys are accepted too; store them under the camelCase alias
        field = ApiConfig.model_fields.get(key)
        merged[field.alias if field and field.alias else key] = value
    try:
        return ApiConfig.model_validate(merged)
    except ValueError as e:
        raise ConfigurationError(f"Invalid configuration in {path}: {e}") from e


# Global settings instance
settings = Settings()
