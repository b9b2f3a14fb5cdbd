from __future__ import annotations
from typing import Any, Callable, List, Tuple

from PySide6.QtCore import QDeadlineTimer, QObject, QThread, Signal, Slot

from movieSearch.settings import OMDB_TIMEOUT
from movieSearch.utils import log_debug

Job       = Callable[[], Any]
OnSuccess = Callable[[Any], None]
OnFailure = Callable[[BaseException], None]
Runner    = Callable[[Job, OnSuccess, OnFailure], None]


# ───────────────────────── Worker skeleton ────────────────────────────────
class _FetchWorker(QObject):
    """Runs one blocking *job* on its own thread and reports the outcome."""
    succeeded = Signal(object)
    failed    = Signal(object)
    finished  = Signal()

    def __init__(self, job: Job):
        super().__init__()
        self.job = job

    @Slot()
    def run(self):
        try:
            result = self.job()
        except Exception as e:
            log_debug(f"fetch-worker error: {e!r}")
            self.failed.emit(e)
        else:
            self.succeeded.emit(result)
        finally:
            self.finished.emit()


class _Relay(QObject):
    """Lives on the caller's thread so callbacks run there, not on the worker."""

    def __init__(self, on_success: OnSuccess, on_failure: OnFailure):
        super().__init__()
        self._on_success = on_success
        self._on_failure = on_failure
        self.delivered = False

    @Slot(object)
    def success(self, result: Any) -> None:
        try:
            self._on_success(result)
        finally:
            self.delivered = True

    @Slot(object)
    def failure(self, exc: BaseException) -> None:
        try:
            self._on_failure(exc)
        finally:
            self.delivered = True


# keeps thread / worker / relay alive until the result has been delivered
_running: List[Tuple[QThread, _FetchWorker, _Relay]] = []


def _reap() -> None:
    _running[:] = [
        e for e in _running
        if not (e[0].isFinished() and e[2].delivered)
    ]


def start_job(job: Job, on_success: OnSuccess, on_failure: OnFailure) -> None:
    """Default runner: *job* on a fresh QThread, callbacks on the calling thread."""
    _reap()
    relay  = _Relay(on_success, on_failure)
    worker = _FetchWorker(job)
    thr    = QThread()
    worker.moveToThread(thr)

    worker.succeeded.connect(relay.success)
    worker.failed.connect(relay.failure)
    worker.finished.connect(thr.quit)

    thr.started.connect(worker.run)
    _running.append((thr, worker, relay))
    thr.start()


def wait_for_jobs(timeout_ms: int = (OMDB_TIMEOUT + 2) * 1000) -> int:
    """
    Block until worker threads have stopped (call before exit).

    Threads still busy after *timeout_ms* stay in `_running`: a QThread
    destroyed while running aborts the whole process. Returns how many remain.
    """
    for thr, _worker, _relay in _running:
        thr.quit()
    deadline = QDeadlineTimer(timeout_ms)
    _running[:] = [e for e in _running if not e[0].wait(deadline)]
    if _running:
        log_debug(f"{len(_running)} worker thread(s) still running at shutdown")
    return len(_running)


def run_inline(job: Job, on_success: OnSuccess, on_failure: OnFailure) -> None:
    """Synchronous runner with the same error contract as `start_job`."""
    try:
        result = job()
    except Exception as e:
        log_debug(f"inline job error: {e!r}")
        on_failure(e)
        return
    on_success(result)
