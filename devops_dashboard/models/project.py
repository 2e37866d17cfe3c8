# devops_dashboard/models/project.py
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

NO_EXTENSION = "no-extension"


class _Record(BaseModel):
    """Immutable snapshot, serialized with its camelCase wire names."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)


class RepositoryStatus(_Record):
    branch: str
    commit_hash: str = Field(alias="commit", max_length=8)
    author_name: str = Field(alias="author")
    last_commit_timestamp: str = Field(alias="lastCommitDate")
    repository_label: str = Field(alias="repository")


class RepositoryStatusError(_Record):
    error_kind: str = Field(alias="error")
    message: str
    repository_label: str = Field(alias="repository")
    fallback_author: str = Field(alias="author")


class ProjectInventory(_Record):
    total_file_count: int = Field(alias="totalFiles", ge=0)
    extension_counts: Dict[str, int] = Field(alias="fileTypes", default_factory=dict)
    relative_directory_paths: List[str] = Field(alias="directories", default_factory=list)
    scan_timestamp: str = Field(alias="lastModified")


class InventoryError(_Record):
    error_kind: str = Field(alias="error")
    message: str
