"""Pull request models."""

from pydantic import BaseModel, ConfigDict, Field

from pr_opener.models.provider import HostingProvider
from pr_opener.models.repository import AzureProject


class PullRequestRequest(BaseModel):
    """Everything needed to build a provider's "new pull request" URL."""

    model_config = ConfigDict(frozen=True)

    provider: HostingProvider = Field(..., description="Hosting provider")
    owner: str = Field(..., description="Repository owner/organization")
    repository: str = Field(..., description="Repository name")

    source_branch: str = Field(..., description="Branch the pull request is opened from")
    target_branch: str = Field(..., description="Branch to merge into (e.g., main)")

    title: str | None = Field(default=None, description="Pull request title")
    description: str | None = Field(default=None, description="Pull request description")
    draft: bool = Field(default=False, description="Open as draft/WIP")

    azure: AzureProject | None = Field(
        default=None, description="Azure DevOps organization/project from the remote URL"
    )
