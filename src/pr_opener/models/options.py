"""Command line options model."""

from pydantic import BaseModel, ConfigDict, Field

from pr_opener.models.provider import Service


class OpenerOptions(BaseModel):
    """Overrides and flags for a single run."""

    model_config = ConfigDict(frozen=True)

    branch: str | None = Field(default=None, description="Source branch (defaults to HEAD)")
    target: str | None = Field(default=None, description="Target branch (detected if unset)")
    remote: str | None = Field(default=None, description="Remote name override")
    force_remote: bool = Field(default=False, description="Ignore upstream even if it exists")
    service: Service | None = Field(default=None, description="Hosting service override")

    title: str | None = Field(default=None, description="Pull request title")
    description: str | None = Field(default=None, description="Pull request description")
    draft: bool = Field(default=False, description="Mark as draft/WIP")
