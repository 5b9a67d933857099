"""Tests for shell helpers and logging utilities."""

import io
import logging
import subprocess

from netbrief.diag import logging_utils, shell
from netbrief.diag.types import CommandResult


def test_cmd_str_quotes_arguments():
    """cmd_str should shell-escape each argument for readability."""

    runner = shell.ShellRunner(logger=logging_utils.LoggingManager("test_logger"))
    rendered = runner.cmd_str(["echo", "hello world", "special&chars"])

    assert rendered == "echo 'hello world' 'special&chars'"


def test_logging_manager_sets_level():
    """setup should stay quiet by default and open up for --debug."""

    manager = logging_utils.LoggingManager("level_test")

    manager.setup(debug=False)
    assert manager.logger.level == logging.WARNING

    manager.setup(debug=True)
    assert manager.logger.level == logging.DEBUG


def test_logging_manager_never_writes_files():
    """Only a stderr stream handler is installed."""

    manager = logging_utils.LoggingManager("handler_test")
    manager.setup(debug=True)

    assert len(manager.logger.handlers) == 1
    assert not isinstance(manager.logger.handlers[0], logging.FileHandler)


def test_logging_manager_formats_debug_arguments():
    """debug should accept formatting args like the stdlib logger."""

    manager = logging_utils.LoggingManager("arg_formatting")
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))

    manager.logger.handlers = [handler]
    manager.logger.setLevel(logging.DEBUG)

    manager.debug("tool=%s attempts=%s", "ip", 3)

    handler.flush()
    assert "tool=ip attempts=3" in stream.getvalue()


def test_run_cmd_reports_spawn_failure():
    """A missing executable becomes a failed result instead of an exception."""

    runner = shell.ShellRunner(logger=logging_utils.LoggingManager("spawn_test"))

    res = runner.run_cmd(["/nonexistent/netbrief-test-binary"])

    assert res.returncode == shell.SPAWN_FAILURE_RC
    assert not res.ok
    assert res.stdout == ""


def test_run_cmd_reports_timeout(monkeypatch):
    """Timeouts are converted into a failed result with an explanation."""

    def _timeout(*args, **kwargs):
        raise subprocess.TimeoutExpired(cmd=args[0], timeout=kwargs["timeout"])

    monkeypatch.setattr(shell.subprocess, "run", _timeout)
    runner = shell.ShellRunner(logger=logging_utils.LoggingManager("timeout_test"))

    res = runner.run_cmd(["ping", "-c", "1", "10.0.0.1"], timeout=2)

    assert res.returncode == shell.TIMEOUT_RC
    assert "timed out" in res.reason


def test_command_result_reason_prefers_stderr():
    failed = CommandResult(cmd=["ip"], returncode=2, stdout="partial", stderr="Cannot open netlink\nmore")
    silent = CommandResult(cmd=["ip"], returncode=1, stdout="", stderr="")
    passed = CommandResult(cmd=["ip"], returncode=0, stdout="x", stderr="warn")

    assert failed.reason == "rc=2: Cannot open netlink"
    assert silent.reason == "rc=1"
    assert passed.ok
    assert passed.reason == ""
