# deploykit

Building blocks for tools that push application artifacts, start deployments
and watch them roll out.

## What is inside

- `deploykit.provider`: the `Provider` dataclass, which bundles the factories
  a platform offers (`new_pusher`, `new_deployer`, `new_deploy_watcher`,
  `new_statuser`, `new_log_streamer`) and a `can_deploy_immediate` flag. Each
  factory is called with an output stream, an outputs source and a `Details`
  record. The components it builds follow these protocols: `Pusher`,
  `Deployer`, `DeployStatusGetter`, `DeployWatcher`, `Statuser` and
  `LogStreamer`.
- `deploykit.rollout`: `RolloutStatus`, which is one of `complete`,
  `pending`, `in-progress`, `failed`, `cancelled` or `unknown`.
- `deploykit.watcher`: `PollingDeployWatcher` polls a `DeployStatusGetter`
  until the rollout completes, fails, is cancelled or times out.
  `polling_deploy_watcher` turns a status getter factory into a factory of
  polling watchers. `DeploymentFailedError` and `DeploymentTimeoutError` are
  the errors a watch can end with.
- `deploykit.cancel`: `CancelError`, raised when a deployment is cancelled.
  If no reason is given, its message is "deployment cancelled".
- `deploykit.logs`: `LogMessage`, `LogStreamOptions`, `LogInitError`,
  `new_log_init_error`, `as_log_init_error`, `format_time`,
  `format_duration` and `writer_log_emitter`.
- `deploykit.metadata`: `DeployMetadata` and `Details`.
- `deploykit.artifacts`: `walk_dir`, which lists every file under a
  directory as a relative path.

## Watching a deployment

```python
import threading

from deploykit.cancel import CancelError
from deploykit.rollout import RolloutStatus
from deploykit.watcher import (
    DeploymentFailedError,
    DeploymentTimeoutError,
    PollingDeployWatcher,
)


class MyStatusGetter:
    def get_deploy_status(self, reference):
        return RolloutStatus.COMPLETE

    def close(self):
        pass


cancel = threading.Event()
watcher = PollingDeployWatcher(status_getter=MyStatusGetter(), delay=5, timeout=900)
try:
    watcher.watch("deployment-123", cancel)
except DeploymentFailedError:
    print("deployment failed")
except DeploymentTimeoutError:
    print("deployment timed out")
except CancelError as exc:
    print(exc)
```

`delay` and `timeout` are in seconds. A value of 0 selects the defaults: the
watcher polls every 5 seconds and gives up after 15 minutes. The status
getter's `close` is called when the watch ends, however it ends.

- An empty reference makes `watch` print a note to the watcher's `stdout`.
  It then returns straight away, because there is nothing to wait for.
- A `failed` status raises `DeploymentFailedError`. A `complete` status
  returns.
- If the status getter raises `CancelError`, that error ends the watch.
  Any other exception from the getter is printed to `stdout` and polling
  carries on.
- If the optional `cancel` event is set, the watch ends with
  `CancelError("context canceled")`.

## Log lines and options

```python
import sys
from deploykit.logs import LogMessage, LogStreamOptions, writer_log_emitter

emit = writer_log_emitter(sys.stdout, color=False)
emit(LogMessage(source_type="k8s", source="ns/app", stream="pod/web", message="ready"))
# [pod/web] ready

options = LogStreamOptions(watch_interval=0)
print(options.query_time_message())  # Querying all logs
print(options.watch_message())       # Watching logs (poll interval = 1s)
```

With `color=True`, the `[stream]` prefix is printed in bold. A negative
`watch_interval` gives "Not watching logs".

`new_log_init_error` builds a `LogInitError` stamped with the current time.
`as_log_init_error` finds one in an exception's cause or context chain, and
returns `None` if there is none.

## Listing artifact files

```python
from deploykit.artifacts import walk_dir

for path in walk_dir("build"):
    print(path)
```

Paths come back sorted by name at each level of the directory tree.
`walk_dir` raises `FileNotFoundError` if the path does not exist.

## What it does not do

The package holds no concrete providers. It has nothing that talks to a cloud
service, container registry, storage bucket or log service, and no registry
that picks a `Provider` for a module. Those have to be written against the
protocols in `deploykit.provider`. There is no command-line tool.

## Running the tests

```
pip install -e .[test]
pytest
```