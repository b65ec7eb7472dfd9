"""Models describing repository handles."""

from pathlib import Path

from pydantic import BaseModel, Field

from polyvcs.vcs.factory import VCSType


class RepoInfo(BaseModel):
    """Summary of a repository handle."""

    vcs_type: VCSType = Field(description="VCS managing the checkout")
    remote: str = Field(default="", description="Remote repository location")
    local_path: Path = Field(description="Path of the local checkout")
    version: str | None = Field(default=None, description="Checked-out revision, if a checkout exists")

    @property
    def has_checkout(self) -> bool:
        """Check if a local checkout was found.

        Returns:
            True if a version could be read from the checkout
        """
        return self.version is not None
