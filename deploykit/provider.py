"""Provider definitions and the interfaces a provider's components implement."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol, TextIO, TypeVar, runtime_checkable

from .logs import LogStreamOptions
from .metadata import DeployMetadata, Details
from .rollout import RolloutStatus

T = TypeVar("T")

# A factory receives the output stream, the outputs source and the app details.
Factory = Callable[[TextIO, Any, Details], T]


@runtime_checkable
class Pusher(Protocol):
    def push(self, source: str, version: str) -> None: ...

    def list_artifact_versions(self) -> list[str]: ...


@runtime_checkable
class Deployer(Protocol):
    def deploy(self, meta: DeployMetadata) -> str: ...


@runtime_checkable
class DeployStatusGetter(Protocol):
    def get_deploy_status(self, reference: str) -> RolloutStatus: ...

    def close(self) -> None: ...


@runtime_checkable
class DeployWatcher(Protocol):
    def watch(self, reference: str, cancel: Any = None) -> None: ...


@runtime_checkable
class Statuser(Protocol):
    def status_overview(self) -> Any: ...

    def status(self) -> Any: ...


@runtime_checkable
class LogStreamer(Protocol):
    def stream(self, options: LogStreamOptions) -> None: ...


@dataclass
class Provider:
    """The set of component factories supported for one kind of application."""

    can_deploy_immediate: bool = False
    new_pusher: Optional[Factory[Pusher]] = None
    new_deployer: Optional[Factory[Deployer]] = None
    new_deploy_watcher: Optional[Factory[DeployWatcher]] = None
    new_statuser: Optional[Factory[Statuser]] = None
    new_log_streamer: Optional[Factory[LogStreamer]] = None