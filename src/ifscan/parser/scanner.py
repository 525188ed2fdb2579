from __future__ import annotations

import logging
from typing import Iterable

from ifscan.core.model import ParseContext
from ifscan.parser.rules import RULES

logger = logging.getLogger(__name__)


def parse_line(ctx: ParseContext, line: str) -> None:
    """Classify one line and apply the first matching rule to ``ctx``."""
    if not line:
        return
    for rule in RULES:
        if rule.matches(ctx, line):
            logger.debug("line=%d rule=%s: [%s]", ctx.line_count, rule.name, line)
            rule.apply(ctx, line)
            return


def scan(lines: Iterable[str], ctx: ParseContext | None = None) -> ParseContext:
    ctx = ctx if ctx is not None else ParseContext()
    for line in lines:
        ctx.line_count += 1
        parse_line(ctx, line)
    return ctx
