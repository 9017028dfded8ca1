"""
以文本表格显示管理条目
"""

from typing import List

import click

from muko.models import ManagedEntry

HEADERS = ["Mode", "Domain", "Alias", "Dev IP", "Prod IP"]

MODE_COLORS = {"DEV": "green", "PROD": "blue"}


def _row(entry: ManagedEntry) -> List[str]:
    return [
        entry.mode,
        entry.domain,
        entry.display_alias,
        entry.ip,
        entry.display_prod_ip,
    ]


def render_table(entries: List[ManagedEntry]) -> str:
    """
    渲染条目表格

    表头加粗，Mode 列按模式着色（DEV 绿色，PROD 蓝色）。
    click.echo 在非终端输出时会去掉颜色。

    参数:
        entries: 按文件顺序排列的条目

    返回:
        带边框的多行文本
    """
    rows = [HEADERS] + [_row(entry) for entry in entries]
    widths = [max(len(row[i]) for row in rows) for i in range(len(HEADERS))]

    border = "+" + "+".join("-" * (w + 2) for w in widths) + "+"

    def fmt(cells: List[str]) -> str:
        return "|" + "|".join(f" {cell} " for cell in cells) + "|"

    # 先补齐宽度再着色，ANSI 转义码不计入列宽
    header = [click.style(h.ljust(w), bold=True) for h, w in zip(HEADERS, widths)]
    out = [border, fmt(header), border.replace("-", "=")]
    for row in rows[1:]:
        cells = [cell.ljust(width) for cell, width in zip(row, widths)]
        cells[0] = click.style(cells[0], fg=MODE_COLORS[row[0]])
        out.append(fmt(cells))
    out.append(border)
    return "\n".join(out)
