"""Link check configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...constants import DEFAULT_STATUSES, MARKDOWN_EXTENSIONS, REQUEST_TIMEOUT


class CheckConfig(BaseModel):
    """Which staged files are checked and how long a network check may take."""

    model_config = ConfigDict(extra="forbid")

    statuses: str = Field(DEFAULT_STATUSES, description="Git status letters to collect (subset of 'admrc')")
    extensions: list[str] = Field(
        default_factory=lambda: list(MARKDOWN_EXTENSIONS), description="Document extensions, without the dot"
    )
    timeout: float = Field(REQUEST_TIMEOUT, gt=0, description="Seconds to wait for a network response")

    @field_validator("statuses")
    @classmethod
    def _validate_statuses(cls, value: str) -> str:
        value = value.lower()
        unknown = sorted(set(value) - set(DEFAULT_STATUSES))
        if unknown:
            raise ValueError(f"Unknown status letters: {''.join(unknown)}")
        return value

    @field_validator("extensions")
    @classmethod
    def _validate_extensions(cls, value: list[str]) -> list[str]:
        return [ext.lower().lstrip(".") for ext in value]
