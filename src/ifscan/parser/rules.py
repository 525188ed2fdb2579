from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from ifscan.core.model import SHUTDOWN_MARKER, Diagnostic, DiagnosticKind, ParseContext

logger = logging.getLogger(__name__)

INTERFACE_KEYWORD = "interface "
BLOCK_END = "!"
SECONDARY_TOKEN = "secondary"

# ParseContext counter -> case-sensitive interface name prefix
CATEGORY_PREFIXES: dict[str, str] = {
    "multilink": "Multi",
    "loopback": "Loop",
    "port_channel": "Port",
}

Predicate = Callable[[ParseContext, str], bool]
Handler = Callable[[ParseContext, str], None]
Extractor = Callable[[str], str | None]


@dataclass(slots=True, frozen=True)
class Rule:
    name: str
    matches: Predicate
    apply: Handler


def report(ctx: ParseContext, diagnostic: Diagnostic) -> None:
    ctx.diagnostics.append(diagnostic)
    logger.warning(diagnostic.message)


def _start_block(ctx: ParseContext, line: str) -> None:
    fields = line[len(INTERFACE_KEYWORD):].split()
    if not fields:
        report(
            ctx,
            Diagnostic(
                line=ctx.line_count,
                kind=DiagnosticKind.BAD_INTERFACE,
                message=f"line={ctx.line_count} bad interface name: [{line}]",
            ),
        )
        return

    name = fields[0]
    ctx.open_block(name)
    for counter, prefix in CATEGORY_PREFIXES.items():
        if name.startswith(prefix):
            setattr(ctx, counter, getattr(ctx, counter) + 1)


def _ignore(ctx: ParseContext, line: str) -> None:
    return None


def _end_block(ctx: ParseContext, line: str) -> None:
    ctx.close_block()


def _remainder(prefix: str) -> Extractor:
    def extract(line: str) -> str:
        return line[len(prefix):].strip()

    return extract


def _primary_address(line: str) -> str | None:
    tokens = line[len(" ip address "):].split()
    if tokens and tokens[-1] == SECONDARY_TOKEN:
        return None
    return tokens[0] if tokens else ""


def _shutdown(line: str) -> str:
    return SHUTDOWN_MARKER


def _attribute_rule(field: str, prefix: str, extract: Extractor, required: bool = False) -> Rule:
    def apply(ctx: ParseContext, line: str) -> None:
        value = extract(line)
        if value is None:
            return
        if required and not value:
            report(
                ctx,
                Diagnostic(
                    line=ctx.line_count,
                    kind=DiagnosticKind.BAD_ATTRIBUTE,
                    message=f"line={ctx.line_count} missing {field} value: [{line}]",
                    attribute=field,
                ),
            )
            return

        record = ctx.current_record()
        old = getattr(record, field)
        if old:
            report(
                ctx,
                Diagnostic(
                    line=ctx.line_count,
                    kind=DiagnosticKind.REDEFINITION,
                    message=f"line={ctx.line_count} {field} redefinition old={old} new={value}: [{line}]",
                    attribute=field,
                    old=old,
                    new=value,
                ),
            )
        setattr(record, field, value)

    return Rule(name=field, matches=lambda ctx, line: line.startswith(prefix), apply=apply)


ATTRIBUTE_RULES: list[Rule] = [
    _attribute_rule("vrf", " ip vrf forwarding ", _remainder(" ip vrf forwarding ")),
    _attribute_rule("address", " ip address ", _primary_address, required=True),
    _attribute_rule("description", " description ", _remainder(" description ")),
    _attribute_rule("bandwidth", " bandwidth ", _remainder(" bandwidth ")),
    _attribute_rule("shutdown", " shutdown", _shutdown),
]

# Order matters: later rules assume block start and block end were filtered out.
RULES: list[Rule] = [
    Rule(name="block-start", matches=lambda ctx, line: line.startswith(INTERFACE_KEYWORD), apply=_start_block),
    Rule(name="outside-block", matches=lambda ctx, line: ctx.current is None, apply=_ignore),
    Rule(name="block-end", matches=lambda ctx, line: line.rstrip() == BLOCK_END, apply=_end_block),
    *ATTRIBUTE_RULES,
]
