"""Restart a task whenever it crashes, with a time watchdog."""

from __future__ import annotations

import os
import signal
import sys
import threading
import time
from dataclasses import dataclass
from typing import Callable

__all__ = [
    "CrashInfo",
    "Crash",
    "WatchdogTimeout",
    "describe_status",
    "is_error",
    "respawn_on_crash",
    "watchdog",
    "main",
]


@dataclass
class CrashInfo:
    """What is known about the last crashed run."""

    oldpid: int = 0
    last_restart: float = 0.0
    last_status: int = 0


class Crash(Exception):
    """A run failed as if killed by ``signum``."""

    def __init__(self, message: str = "crashed", signum: int = signal.SIGSEGV) -> None:
        super().__init__(message)
        self.signum = int(signum)


class WatchdogTimeout(Crash):
    """The watchdog found the run over its time limit."""

    def __init__(self) -> None:
        super().__init__("process time exceeded", signal.SIGXCPU)


_armed_watchdogs: set[threading.Event] = set()
_watchdog_lock = threading.Lock()


def describe_status(status: int) -> str:
    """Explain a wait status in one line per fact it holds."""
    lines = []
    if os.WIFEXITED(status):
        lines.append(f"Called exit({os.WEXITSTATUS(status)}).\n")
    if os.WIFSIGNALED(status):
        lines.append(f"Killed by signal {os.WTERMSIG(status)}.\n")
    if os.WCOREDUMP(status):
        lines.append("Core dumped.\n")
    if os.WIFSTOPPED(status):
        lines.append(f"Stopped (=paused) by signal {os.WSTOPSIG(status)}.\n")
    if os.WIFCONTINUED(status):
        lines.append("Resumed  by delivery of SIGCONT.\n")
    return "".join(lines)


def is_error(status: int) -> bool:
    """True unless the status is a normal exit with code 0."""
    return not (os.WIFEXITED(status) and os.WEXITSTATUS(status) == 0)


def _status_of(error: BaseException) -> int:
    """Express how a run ended as a wait status."""
    if isinstance(error, SystemExit):
        code = error.code
        if code is None:
            return 0
        if isinstance(code, int):
            return (code & 0xFF) << 8
        return 1 << 8
    if isinstance(error, Crash):
        return error.signum & 0x7F
    return int(signal.SIGABRT)


def _disarm_watchdogs() -> None:
    with _watchdog_lock:
        for event in _armed_watchdogs:
            event.set()
        _armed_watchdogs.clear()


def respawn_on_crash(crash: CrashInfo) -> Callable[[Callable[[bool], object]], Callable[[], None]]:
    """Wrap a task so that it is started again each time it fails.

    The task is called with True when an earlier run had crashed. The
    returned callable ends once a run finishes cleanly.
    """

    def decorate(task: Callable[[bool], object]) -> Callable[[], None]:
        def run() -> None:
            crashed = False
            while True:
                crash.last_restart = time.time()
                try:
                    task(crashed)
                    status = 0
                except KeyboardInterrupt:
                    _disarm_watchdogs()
                    raise
                except (Exception, SystemExit) as error:
                    status = _status_of(error)
                _disarm_watchdogs()

                if not is_error(status):
                    return
                sys.stdout.write(describe_status(status))
                sys.stdout.write("Child crashed, restarting...\n")
                sys.stdout.flush()
                crashed = True
                crash.oldpid = os.getpid()
                crash.last_status = status
                time.sleep(1)

        return run

    return decorate


def _raise_timeout(signum, frame) -> None:
    raise WatchdogTimeout()


def watchdog(timeout: float) -> threading.Event | None:
    """Stop the running task if it is still going after ``timeout`` seconds.

    Returns an event that disarms the watchdog when set.
    """
    if timeout <= 0:
        return None
    if threading.current_thread() is threading.main_thread():
        signal.signal(signal.SIGXCPU, _raise_timeout)

    start = time.time()
    disarmed = threading.Event()
    with _watchdog_lock:
        _armed_watchdogs.add(disarmed)

    def guard() -> None:
        if disarmed.wait(max(0.0, timeout - (time.time() - start))):
            return
        sys.stdout.write("Watchdog: process time exceeded\n")
        sys.stdout.flush()
        os.kill(os.getpid(), signal.SIGXCPU)
        if not disarmed.wait(1):
            os.kill(os.getpid(), signal.SIGKILL)

    threading.Thread(target=guard, name="watchdog", daemon=True).start()
    return disarmed


def main(argv: list[str] | None = None) -> int:
    """Run a deliberately crashing task under the restarter and watchdog."""
    crash = CrashInfo()

    def task(crashed: bool) -> None:
        if crashed:
            sys.stdout.write("####################################\n")
            sys.stdout.write("Crash detected, process restarted. ")
            sys.stdout.write(
                f"Old pid {crash.oldpid} crashed after "
                f"{int(time.time() - crash.last_restart)} seconds. "
            )
            sys.stdout.write(describe_status(crash.last_status))
            sys.stdout.write("####################################\n")
            sys.stdout.flush()

        watchdog(2)
        time.sleep(10)

        sys.stdout.write("Woke up, doing risky stuff...\n")
        sys.stdout.flush()
        raise Crash("invalid memory access")

    respawn_on_crash(crash)(task)()
    return 0


if __name__ == "__main__":
    sys.exit(main())