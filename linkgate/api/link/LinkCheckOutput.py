"""Output schema for the link check command."""

from pydantic import BaseModel, ConfigDict, Field


class LinkCheckOutput(BaseModel):
    """Structured result of a staged-document link check."""

    model_config = ConfigDict(extra="forbid")

    invalid_links: dict[str, list[str]] = Field(
        default_factory=dict, description="Unresolved targets per document relative path"
    )
    documents: list[str] = Field(default_factory=list, description="Documents checked, in order")
    errors: list[str] = Field(default_factory=list, description="Fatal errors that stopped the run")
