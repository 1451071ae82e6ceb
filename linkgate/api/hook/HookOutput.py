"""Output schema for hook commands."""

from pydantic import BaseModel, ConfigDict


class HookOutput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    hook_path: str
    installed: bool
    errors: list[str] = []
