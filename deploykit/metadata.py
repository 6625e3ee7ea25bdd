"""Data describing a deployment and the application it targets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class DeployMetadata:
    """Information about the artifact being deployed."""

    repo: str = ""
    version: str = ""
    commit_sha: str = ""
    type: str = ""
    package_mode: str = ""


@dataclass
class Details:
    """The application, environment, workspace and module being deployed."""

    app: Optional[Any] = None
    env: Optional[Any] = None
    workspace: Optional[Any] = None
    workspace_config: Optional[Any] = None
    module: Optional[Any] = None