"""Wait for a process to exit, then run a command (typically to restart it)."""

from __future__ import annotations

import os
import subprocess
import sys
import time

import psutil

DEFAULT_INTERVAL = 0.01


def _error(message: str) -> None:
    print(f"[Watchdog] [Error] {message}", file=sys.stderr)


def is_pid_open(pid: int) -> bool:
    """Whether a process with this id exists."""
    return psutil.pid_exists(pid)


def is_process_name_open(name: str) -> bool:
    """Whether a running process has this executable name."""
    for proc in psutil.process_iter(["name", "cmdline"]):
        info = proc.info
        if info.get("name") == name:
            return True
        cmdline = info.get("cmdline") or []
        if cmdline and os.path.basename(cmdline[0].replace("\\", "/")) == name:
            return True
    return False


def _leading_int(text: str) -> int:
    digits = ""
    for ch in text:
        if not ch.isdigit():
            break
        digits += ch
    return int(digits)


def is_target_open(target: str) -> bool:
    """Check a target given as a pid (leading digit) or a process name."""
    if target and target[0].isdigit():
        return is_pid_open(_leading_int(target))
    return is_process_name_open(target)


def watch(target: str, command: str, interval: float = DEFAULT_INTERVAL) -> int:
    """Poll until ``target`` is gone, then run ``command`` in a shell.

    Returns the command's exit status.
    """
    while is_target_open(target):
        time.sleep(interval)
    return subprocess.run(command, shell=True).returncode


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        _error("Usage: watchdog <pid/process name> <command>.")
        _error(
            " <pid/process name> If your monitoring a windowed application "
            "use the process name not the pid."
        )
        _error(
            " <command>          The (system) command to execute after the "
            "monitored application has shutdown"
        )
        return 1
    command = "".join(arg + " " for arg in args[1:])
    watch(args[0], command)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())