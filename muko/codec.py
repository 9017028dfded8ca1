"""
单行 muko 管理条目的解析与序列化

只处理字符串，不做任何文件或网络 I/O。
"""

import re
from typing import Optional

from muko.models import ManagedEntry

MANAGED_TAG = "#muko:"

# 分组: (可选 #) (IPv4 或 IPv6) (主机名) #muko: (别名)
LINE_PATTERN = re.compile(
    r"^(#)?\s*((?:\d+\.\d+\.\d+\.\d+)|(?:[0-9a-fA-F:]+))\s+(\S+)\s+"
    + re.escape(MANAGED_TAG)
    + r"\s*(\S*)"
)


def is_managed_candidate(line: str) -> bool:
    """快速检查：行内是否包含 muko 标记"""
    return MANAGED_TAG in line


def decode(line: str) -> Optional[ManagedEntry]:
    """
    把一行 hosts 文本解析为 ManagedEntry

    包含标记但不符合语法的行视为非管理行，直接返回 None 而不报错。

    参数:
        line: hosts 文件中的一行（可带换行符）

    返回:
        解析出的 ManagedEntry，非管理行返回 None
    """
    if not is_managed_candidate(line):
        return None

    match = LINE_PATTERN.match(line.rstrip("\r\n"))
    if match is None:
        return None

    commented, ip, domain, alias = match.groups()
    return ManagedEntry(
        ip=ip,
        domain=domain,
        alias=alias or None,
        active=commented is None,
    )


def encode(entry: ManagedEntry) -> str:
    """
    把 ManagedEntry 序列化为 hosts 文件行

    参数:
        entry: 要序列化的条目

    返回:
        "<IP> <主机名> #muko: <别名>"，非活动条目以 # 开头
    """
    line = f"{entry.ip} {entry.domain} {MANAGED_TAG} {entry.alias or ''}"
    if not entry.active:
        line = f"#{line}"
    return line
