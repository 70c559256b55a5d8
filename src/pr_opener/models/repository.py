"""Models describing the local repository and its remotes."""

from pydantic import BaseModel, ConfigDict, Field


class RemoteReference(BaseModel):
    """A configured git remote."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Remote name (e.g., origin, upstream)")
    url: str = Field(..., description="Remote fetch URL")


class OwnerRepo(BaseModel):
    """Owner and repository name extracted from a remote URL."""

    model_config = ConfigDict(frozen=True)

    owner: str = Field(..., min_length=1, description="Repository owner/organization")
    repository: str = Field(..., min_length=1, description="Repository name")


class AzureProject(BaseModel):
    """Azure DevOps coordinates extracted from a remote URL."""

    model_config = ConfigDict(frozen=True)

    organization: str = Field(..., min_length=1, description="Azure DevOps organization")
    project: str = Field(..., min_length=1, description="Azure DevOps project")
    repository: str | None = Field(
        default=None, description="Repository name, when present in the URL"
    )
