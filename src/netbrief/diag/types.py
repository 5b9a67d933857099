"""Shared dataclasses and enums for the netbrief diagnostics."""

from __future__ import annotations

import dataclasses
import enum
from collections.abc import Callable, Iterable
from contextlib import AbstractContextManager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from netbrief.diag.shell import ShellRunner


@dataclasses.dataclass
class CommandResult:
    cmd: list[str]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def reason(self) -> str:
        """Short explanation of a failed command, empty when it succeeded."""
        if self.ok:
            return ""
        detail = self.stderr.strip() or self.stdout.strip()
        if detail:
            return f"rc={self.returncode}: {detail.splitlines()[0]}"
        return f"rc={self.returncode}"


class Tool(enum.Enum):
    """External utilities netbrief knows how to use."""

    IP = "ip"
    IFCONFIG = "ifconfig"
    SS = "ss"
    NETSTAT = "netstat"
    NMCLI = "nmcli"
    RESOLVECTL = "resolvectl"
    DIG = "dig"
    CURL = "curl"
    IW = "iw"
    PING = "ping"
    HOSTNAMECTL = "hostnamectl"
    BAT = "bat"


PAGER_TOOL = Tool.BAT


@dataclasses.dataclass(frozen=True)
class ToolAvailability:
    """Snapshot of which tools were found on PATH."""

    present: frozenset[Tool] = frozenset()

    @classmethod
    def of(cls, tools: Iterable[Tool]) -> ToolAvailability:
        return cls(present=frozenset(tools))

    def has(self, tool: Tool) -> bool:
        return tool in self.present

    @property
    def pager(self) -> bool:
        return self.has(PAGER_TOOL)

    def as_dict(self) -> dict[str, bool]:
        return {tool.value: tool in self.present for tool in Tool}


@dataclasses.dataclass(frozen=True)
class RunOptions:
    verbose: bool = False
    interactive: bool = False
    ping: bool = True
    public_ip: bool = True
    debug: bool = False


Spinner = Callable[[str], AbstractContextManager]


@dataclasses.dataclass(frozen=True)
class SectionContext:
    """Everything a section handler may consult while it runs."""

    tools: ToolAvailability
    options: RunOptions
    shell: ShellRunner
    spinner: Spinner


class SectionId(enum.Enum):
    SYSTEM_SUMMARY = "System summary"
    INTERFACES = "Interfaces"
    IP_DETAILS = "IP details"
    ROUTES = "Routes"
    DNS = "DNS"
    CONNECTIONS = "Connections"
    WIRELESS = "Wireless"
    PING_TESTS = "Ping tests"
    PUBLIC_IP = "Public IP"
    NEIGHBORS = "Neighbors"

    @property
    def label(self) -> str:
        return self.value


@dataclasses.dataclass(frozen=True)
class Section:
    id: SectionId
    title: str
    handler: Callable[[SectionContext], str]

    @property
    def label(self) -> str:
        return self.id.label
