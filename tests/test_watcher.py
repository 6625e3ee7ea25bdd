import io
import threading

import pytest

from deploykit.cancel import CancelError
from deploykit.metadata import Details
from deploykit.rollout import RolloutStatus
from deploykit.watcher import (
    DeploymentFailedError,
    DeploymentTimeoutError,
    PollingDeployWatcher,
    polling_deploy_watcher,
)


class FakeGetter:
    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = 0
        self.references = []
        self.closed = False

    def get_deploy_status(self, reference):
        self.references.append(reference)
        item = self.responses[min(self.calls, len(self.responses) - 1)]
        self.calls += 1
        if isinstance(item, BaseException):
            raise item
        return item

    def close(self):
        self.closed = True


def make_watcher(getter, timeout=0.05):
    return PollingDeployWatcher(
        status_getter=getter, stdout=io.StringIO(), delay=0.001, timeout=timeout
    )


def test_success():
    getter = FakeGetter([RolloutStatus.IN_PROGRESS, RolloutStatus.COMPLETE])
    watcher = make_watcher(getter, timeout=5)
    assert watcher.watch("stub") is None
    assert getter.calls == 2
    assert getter.references == ["stub", "stub"]
    assert getter.closed


def test_status_not_implemented_times_out():
    err = RuntimeError("status is not supported for the ec2 provider")
    getter = FakeGetter([err, err])
    watcher = make_watcher(getter)
    with pytest.raises(DeploymentTimeoutError, match="deployment timed out"):
        watcher.watch("stub")
    assert getter.calls >= 2
    assert getter.closed
    assert "status is not supported for the ec2 provider" in watcher.stdout.getvalue()


def test_failed_status():
    getter = FakeGetter([RolloutStatus.FAILED])
    with pytest.raises(DeploymentFailedError, match="deployment failed"):
        make_watcher(getter).watch("stub")
    assert getter.calls == 1
    assert getter.closed


def test_deployment_times_out():
    getter = FakeGetter([RolloutStatus.IN_PROGRESS, RolloutStatus.IN_PROGRESS])
    with pytest.raises(DeploymentTimeoutError, match="deployment timed out"):
        make_watcher(getter).watch("stub")
    assert getter.calls >= 2
    assert getter.closed


def test_empty_reference_returns_immediately():
    getter = FakeGetter([RolloutStatus.FAILED])
    watcher = make_watcher(getter)
    watcher.watch("")
    assert getter.calls == 0
    assert getter.closed
    assert "does not have to wait" in watcher.stdout.getvalue()


def test_getter_cancel_error_propagates():
    getter = FakeGetter([CancelError("evicted")])
    with pytest.raises(CancelError, match="evicted"):
        make_watcher(getter).watch("stub")
    assert getter.closed


def test_cancel_event_stops_watch():
    getter = FakeGetter([RolloutStatus.IN_PROGRESS])
    cancel = threading.Event()
    cancel.set()
    with pytest.raises(CancelError) as info:
        make_watcher(getter, timeout=5).watch("stub", cancel)
    assert info.value.is_cancel()
    assert getter.calls == 1
    assert getter.closed


def test_factory_wraps_status_getter():
    getter = FakeGetter([RolloutStatus.COMPLETE])
    seen = []

    def getter_factory(stdout, source, details):
        seen.append((stdout, source, details))
        return getter

    out = io.StringIO()
    details = Details()
    watcher = polling_deploy_watcher(getter_factory)(out, "outputs", details)
    assert watcher.status_getter is getter
    assert watcher.stdout is out
    assert seen == [(out, "outputs", details)]
    watcher.watch("ref")
    assert getter.references == ["ref"]


def test_factory_error_propagates():
    def getter_factory(stdout, source, details):
        raise ValueError("no credentials")

    with pytest.raises(ValueError, match="no credentials"):
        polling_deploy_watcher(getter_factory)(io.StringIO(), None, Details())