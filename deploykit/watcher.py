"""Watch a deployment by polling its rollout status."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, TextIO

from .cancel import CancelError
from .metadata import Details
from .provider import DeployStatusGetter
from .rollout import RolloutStatus

WATCH_DEFAULT_TIMEOUT = 15 * 60.0
WATCH_DEFAULT_DELAY = 5.0


class DeploymentTimeoutError(Exception):
    """The deployment did not finish before the timeout."""

    def __init__(self, message: str = "deployment timed out") -> None:
        super().__init__(message)


class DeploymentFailedError(Exception):
    """The provider reported that the deployment failed."""

    def __init__(self, message: str = "deployment failed") -> None:
        super().__init__(message)


@dataclass
class PollingDeployWatcher:
    """Polls a status getter until the rollout completes, fails or times out.

    ``delay`` and ``timeout`` are in seconds; 0 selects the defaults of
    5 seconds and 15 minutes.
    """

    status_getter: DeployStatusGetter
    stdout: TextIO = field(default_factory=lambda: sys.stdout)
    delay: float = 0.0
    timeout: float = 0.0

    def watch(self, reference: str, cancel: Optional[threading.Event] = None) -> None:
        """Block until the deployment completes.

        Raises DeploymentFailedError, DeploymentTimeoutError or CancelError.
        """
        try:
            self._watch(reference, cancel)
        finally:
            self.status_getter.close()

    def _watch(self, reference: str, cancel: Optional[threading.Event]) -> None:
        if not reference:
            print(
                "This deployment does not have to wait for any resource to become healthy.",
                file=self.stdout,
            )
            return

        delay = self.delay or WATCH_DEFAULT_DELAY
        timeout = self.timeout or WATCH_DEFAULT_TIMEOUT
        deadline = time.monotonic() + timeout
        while True:
            try:
                status = self.status_getter.get_deploy_status(reference)
            except CancelError:
                raise
            except Exception as exc:  # keep polling; the deploy may still be booting
                print(
                    f"error occurred fetching the deployment status from the provider: {exc}",
                    file=self.stdout,
                )
            else:
                if status == RolloutStatus.FAILED:
                    raise DeploymentFailedError()
                if status == RolloutStatus.COMPLETE:
                    return

            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise DeploymentTimeoutError()
            wait = min(delay, remaining)
            if cancel is not None:
                if cancel.is_set() or cancel.wait(wait):
                    raise CancelError("context canceled")
            else:
                time.sleep(wait)
            if time.monotonic() >= deadline:
                raise DeploymentTimeoutError()


def polling_deploy_watcher(
    status_getter_factory: Callable[[TextIO, Any, Details], DeployStatusGetter],
) -> Callable[[TextIO, Any, Details], PollingDeployWatcher]:
    """Wrap a status getter factory into a factory of polling deploy watchers."""

    def factory(stdout: TextIO, source: Any, app_details: Details) -> PollingDeployWatcher:
        getter = status_getter_factory(stdout, source, app_details)
        return PollingDeployWatcher(status_getter=getter, stdout=stdout)

    return factory