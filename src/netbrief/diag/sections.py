"""Section handlers and the ordered section registry.

Every handler receives a :class:`SectionContext` and returns the text to show
under its header. Handlers pick the most capable tool that was detected, fall
back to a secondary tool, and otherwise explain what is missing. They never
raise for a missing tool or a failing command and never return empty text.
"""

from __future__ import annotations

import platform
import socket

from netbrief.diag.probes import (
    RESOLV_CONF,
    default_gateway,
    ping_host,
    public_address,
    read_resolv_conf,
)
from netbrief.diag.types import Section, SectionContext, SectionId, Tool

MAX_LINES = 40
VERBOSE_HINT = "(Use --verbose to see full list.)"

DNS_TEST_NAME = "example.com"
PING_PUBLIC_IP = "1.1.1.1"


def _line_limit(ctx: SectionContext) -> int | None:
    return None if ctx.options.verbose else MAX_LINES


def _run_block(
    ctx: SectionContext,
    label: str,
    cmd: list[str],
    *,
    limit: int | None = None,
    failure: str | None = None,
) -> str:
    """Run ``cmd`` and format its output under a captioned block."""
    res = ctx.shell.run_cmd(cmd)
    body = res.stdout.rstrip("\n")

    if not res.ok:
        note = failure or f"Command failed ({res.reason})."
        body = f"{body}\n{note}" if body else note
    elif not body.strip():
        body = "(no output)"
    elif limit is not None:
        lines = body.splitlines()
        if len(lines) > limit:
            body = "\n".join(lines[:limit]) + f"\n\n{VERBOSE_HINT}"

    return f"{label} ({ctx.shell.cmd_str(cmd)}):\n\n{body}\n"


def system_summary(ctx: SectionContext) -> str:
    if ctx.tools.has(Tool.HOSTNAMECTL):
        res = ctx.shell.run_cmd(["hostnamectl"])
        if res.ok and res.stdout.strip():
            return res.stdout

    uname = platform.uname()
    kernel = " ".join(part for part in (uname.system, uname.release, uname.machine) if part)
    return f"Hostname: {socket.gethostname() or 'n/a'}\nKernel:   {kernel or 'n/a'}\n"


def interfaces(ctx: SectionContext) -> str:
    if ctx.tools.has(Tool.IP):
        return "\n".join(
            [
                _run_block(ctx, "Interface summary", ["ip", "-brief", "addr", "show"]),
                _run_block(ctx, "Link status", ["ip", "-brief", "link"]),
            ]
        )
    if ctx.tools.has(Tool.IFCONFIG):
        return _run_block(ctx, "Interface summary", ["ifconfig", "-a"])
    return "No suitable tool found for interface listing (ip/ifconfig).\n"


def ip_details(ctx: SectionContext) -> str:
    if ctx.tools.has(Tool.NMCLI):
        return _run_block(
            ctx,
            "IP configuration for active connections",
            [
                "nmcli",
                "-f",
                "NAME,DEVICE,IP4.ADDRESS,IP4.GATEWAY,IP4.DNS,IP6.ADDRESS,IP6.GATEWAY,IP6.DNS",
                "connection",
                "show",
                "--active",
            ],
        )
    if ctx.tools.has(Tool.IP):
        return _run_block(ctx, "IP addresses", ["ip", "addr", "show"])
    return "No nmcli/ip available for detailed IP configuration.\n"


def routes(ctx: SectionContext) -> str:
    if ctx.tools.has(Tool.IP):
        return _run_block(ctx, "Routing table", ["ip", "route"])
    if ctx.tools.has(Tool.NETSTAT):
        return _run_block(ctx, "Routing table", ["netstat", "-rn"])
    return "No suitable tool found for route listing (ip/netstat).\n"


def dns(ctx: SectionContext) -> str:
    chunks: list[str] = []

    if ctx.tools.has(Tool.RESOLVECTL):
        chunks.append(_run_block(ctx, "DNS status", ["resolvectl", "status"]))
    else:
        contents = read_resolv_conf()
        if contents is None:
            chunks.append(f"{RESOLV_CONF}:\n\nCould not read {RESOLV_CONF}.\n")
        else:
            chunks.append(f"{RESOLV_CONF}:\n\n{contents.rstrip() or '(empty)'}\n")

    if ctx.tools.has(Tool.DIG):
        chunks.append(
            _run_block(
                ctx,
                f"DNS lookup test for {DNS_TEST_NAME}",
                ["dig", "+short", "+time=2", "+tries=1", DNS_TEST_NAME],
                failure="DNS lookup failed or dig error.",
            )
        )
    else:
        chunks.append(f"Note: dig not available, skipping {DNS_TEST_NAME} DNS lookup.\n")

    return "\n".join(chunks)


def connections(ctx: SectionContext) -> str:
    limit = _line_limit(ctx)
    if ctx.tools.has(Tool.SS):
        return "\n".join(
            [
                _run_block(ctx, "Listening sockets", ["ss", "-tulpn"], limit=limit),
                _run_block(ctx, "Recent TCP connections", ["ss", "-tan"], limit=limit),
            ]
        )
    if ctx.tools.has(Tool.NETSTAT):
        return _run_block(ctx, "Listening sockets", ["netstat", "-tulpn"], limit=limit)
    return "No ss/netstat available for connections overview.\n"


def wireless(ctx: SectionContext) -> str:
    if ctx.tools.has(Tool.NMCLI):
        return "\n".join(
            [
                _run_block(ctx, "NetworkManager devices", ["nmcli", "device", "status"]),
                _run_block(
                    ctx,
                    "Active connections",
                    ["nmcli", "-f", "NAME,UUID,TYPE,DEVICE,STATE", "connection", "show", "--active"],
                ),
                _run_block(
                    ctx,
                    "Wi-Fi networks",
                    ["nmcli", "device", "wifi", "list"],
                    failure="Could not list Wi-Fi networks.",
                ),
            ]
        )
    if ctx.tools.has(Tool.IW):
        return (
            _run_block(ctx, "Wireless devices", ["iw", "dev"])
            + "\nStation info: run 'iw dev <iface> link' for a specific interface.\n"
        )
    return "No nmcli/iw found; skipping wireless diagnostics.\n"


def ping_tests(ctx: SectionContext) -> str:
    if not ctx.options.ping:
        return "Ping tests disabled via --no-ping.\n"
    if not ctx.tools.has(Tool.PING):
        return "ping not available; skipping connectivity tests.\n"

    lines: list[str] = []

    gateway = default_gateway(ctx.shell) if ctx.tools.has(Tool.IP) else None
    if gateway:
        with ctx.spinner(f"Pinging default gateway ({gateway})"):
            res = ping_host(gateway, deadline=1, shell=ctx.shell)
        if res.ok:
            lines.append(f"Default gateway ({gateway}) is reachable.")
        else:
            lines.append(f"Default gateway ({gateway}) is NOT reachable.")
    else:
        lines.append("No default gateway detected.")

    with ctx.spinner(f"Pinging public IP {PING_PUBLIC_IP}"):
        res = ping_host(PING_PUBLIC_IP, deadline=1, shell=ctx.shell)
    if res.ok:
        lines.append(f"Basic external IP connectivity ({PING_PUBLIC_IP}) appears OK.")
    else:
        lines.append(f"Failed to reach {PING_PUBLIC_IP}; possible upstream connectivity issue.")

    with ctx.spinner(f"Pinging {DNS_TEST_NAME} (DNS + connectivity)"):
        res = ping_host(DNS_TEST_NAME, deadline=2, shell=ctx.shell)
    if res.ok:
        lines.append(f"DNS + external connectivity ({DNS_TEST_NAME}) appears OK.")
    else:
        lines.append(f"Failed to ping {DNS_TEST_NAME}; check DNS and upstream connectivity.")

    return "\n".join(lines) + "\n"


def public_ip(ctx: SectionContext) -> str:
    if not ctx.options.public_ip:
        return "Public IP lookup disabled via --no-public-ip.\n"
    if not ctx.tools.has(Tool.CURL):
        return "curl not available; cannot query external IP.\n"

    with ctx.spinner("Querying IPv4 public address"):
        v4 = public_address(4, shell=ctx.shell)
    with ctx.spinner("Querying IPv6 public address"):
        v6 = public_address(6, shell=ctx.shell)

    return f"Public IPv4: {v4 or 'unavailable'}\nPublic IPv6: {v6 or 'unavailable'}\n"


def neighbors(ctx: SectionContext) -> str:
    if ctx.tools.has(Tool.IP):
        return _run_block(ctx, "Neighbor table", ["ip", "neigh"])
    return "No ip tool available; skipping neighbor table.\n"


SECTIONS: tuple[Section, ...] = (
    Section(SectionId.SYSTEM_SUMMARY, "System summary", system_summary),
    Section(SectionId.INTERFACES, "Network interfaces", interfaces),
    Section(SectionId.IP_DETAILS, "IP configuration details", ip_details),
    Section(SectionId.ROUTES, "Routing table / default gateway", routes),
    Section(SectionId.DNS, "DNS configuration and resolution", dns),
    Section(SectionId.CONNECTIONS, "Active connections / listeners", connections),
    Section(SectionId.WIRELESS, "Wireless / Wi-Fi details", wireless),
    Section(SectionId.PING_TESTS, "Connectivity tests (ping)", ping_tests),
    Section(SectionId.PUBLIC_IP, "External / public IP information", public_ip),
    Section(SectionId.NEIGHBORS, "Neighbor / ARP table", neighbors),
)
