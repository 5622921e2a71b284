import signal

import pytest

from oddments.procrestart import CrashInfo, describe_status, is_error


def test_describe_exit():
    assert describe_status(3 << 8) == "Called exit(3).\n"


def test_describe_signal():
    expected = f"Killed by signal {int(signal.SIGTERM)}.\n"
    assert describe_status(int(signal.SIGTERM)) == expected


def test_describe_core_dump():
    text = describe_status(int(signal.SIGSEGV) | 0x80)
    assert text.startswith(f"Killed by signal {int(signal.SIGSEGV)}.\n")
    assert text.endswith("Core dumped.\n")


@pytest.mark.parametrize(
    "status, expected",
    [(0, False), (1 << 8, True), (int(signal.SIGKILL), True)],
)
def test_is_error(status, expected):
    assert is_error(status) is expected


def test_crash_info_is_mutable_record():
    crash = CrashInfo()
    crash.oldpid = 42
    crash.last_status = 1 << 8
    assert crash == CrashInfo(oldpid=42, last_restart=0.0, last_status=1 << 8)