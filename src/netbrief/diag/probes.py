"""Probe helpers for connectivity checks and local files."""

from __future__ import annotations

from netbrief.diag.shell import DEFAULT_SHELL, ShellRunner
from netbrief.diag.types import CommandResult

PUBLIC_IP_URL = "https://ifconfig.me"
PUBLIC_IP_MAX_TIME = 2
RESOLV_CONF = "/etc/resolv.conf"


def default_gateway(shell: ShellRunner = DEFAULT_SHELL) -> str | None:
    """Return the first default gateway address reported by ``ip route``."""
    res = shell.run_cmd(["ip", "route", "show", "default"])
    if not res.ok:
        return None
    for line in res.stdout.splitlines():
        parts = line.split()
        if len(parts) >= 3 and parts[0] == "default" and parts[1] == "via":
            return parts[2]
    return None


def ping_host(host: str, deadline: int = 1, shell: ShellRunner = DEFAULT_SHELL) -> CommandResult:
    """Send one echo request, waiting at most ``deadline`` seconds for a reply."""
    return shell.run_cmd(
        ["ping", "-c", "1", "-W", str(deadline), host],
        timeout=deadline + 1,
    )


def public_address(family: int, shell: ShellRunner = DEFAULT_SHELL) -> str | None:
    """Ask the public echo service for our address over IPv4 or IPv6."""
    res = shell.run_cmd(
        ["curl", f"-{family}s", "--max-time", str(PUBLIC_IP_MAX_TIME), PUBLIC_IP_URL],
        timeout=PUBLIC_IP_MAX_TIME + 1,
    )
    address = res.stdout.strip()
    if not res.ok or not address:
        return None
    return address


def read_resolv_conf(path: str = RESOLV_CONF) -> str | None:
    """Return resolv.conf contents, or None when unreadable."""
    try:
        with open(path, encoding="utf-8", errors="replace") as fh:
            return fh.read()
    except OSError:
        return None
