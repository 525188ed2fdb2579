from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

SHUTDOWN_MARKER = "shutdown"


class DiagnosticKind(str, Enum):
    BAD_INTERFACE = "BAD_INTERFACE"
    BAD_ATTRIBUTE = "BAD_ATTRIBUTE"
    REDEFINITION = "REDEFINITION"


@dataclass(slots=True)
class Diagnostic:
    line: int
    kind: DiagnosticKind
    message: str
    attribute: str | None = None
    old: str | None = None
    new: str | None = None


@dataclass(slots=True)
class InterfaceRecord:
    name: str
    vrf: str = ""
    address: str = ""
    bandwidth: str = ""
    description: str = ""
    shutdown: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "vrf": self.vrf,
            "address": self.address,
            "bandwidth": self.bandwidth,
            "description": self.description,
            "shutdown": self.shutdown,
        }


@dataclass(slots=True)
class ParseContext:
    table: dict[str, InterfaceRecord] = field(default_factory=dict)
    current: str | None = None
    line_count: int = 0
    multilink: int = 0
    loopback: int = 0
    port_channel: int = 0
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def current_record(self) -> InterfaceRecord:
        """Record of the open block; only valid while ``current`` is set."""
        return self.table[self.current]

    def open_block(self, name: str) -> None:
        if name not in self.table:
            self.table[name] = InterfaceRecord(name=name)
        self.current = name

    def close_block(self) -> None:
        self.current = None

    def redefinitions(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.kind == DiagnosticKind.REDEFINITION]
