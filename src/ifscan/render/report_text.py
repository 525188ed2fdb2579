from __future__ import annotations

from typing import Iterable

from ifscan.core.model import InterfaceRecord, ParseContext

ROW_FORMAT = '{name:>25},{vrf:>15},{address:>15},{bandwidth:>10},{shutdown:>8},"{description}"'


def summary_lines(ctx: ParseContext) -> list[str]:
    return [
        f"{ctx.line_count} lines, {len(ctx.table)} interfaces",
        f"{ctx.multilink} multilink, {ctx.loopback} loopback, {ctx.port_channel} port-channel",
    ]


def render_row(record: InterfaceRecord) -> str:
    return ROW_FORMAT.format(**record.to_dict())


def render_table(records: Iterable[InterfaceRecord]) -> list[str]:
    return [render_row(record) for record in records]
