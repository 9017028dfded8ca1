"""
添加域名模块：去重并追加新的管理条目
"""

from dataclasses import dataclass
from typing import List

from muko.codec import encode
from muko.models import ManagedEntry


@dataclass
class AddResult:
    """
    添加操作的结果

    属性:
        lines: 重写后的行列表
        replaced: 是否移除了同一域名的旧条目
        entry_line: 新追加的行
    """

    lines: List[str]
    replaced: bool
    entry_line: str


def is_duplicate(line: str, domain: str) -> bool:
    """
    判断一行是否已经映射了 domain

    不要求 muko 标记：普通的 "ip 主机名" 行同样算作重复。
    行首的一个 # 会被去掉，之后的 # 视为行内注释。
    """
    content = line.lstrip()
    if content.startswith("#"):
        content = content[1:].lstrip()
    content = content.split("#", 1)[0]

    tokens = content.split()
    return len(tokens) >= 2 and domain in tokens[1:]


def add_domain(lines: List[str], domain: str, ip: str, alias: str) -> AddResult:
    """
    添加一个 DEV 模式的管理条目

    所有已有的同域名映射都会被移除，新条目总是追加在末尾。

    参数:
        lines: hosts 文件的全部行
        domain: 要添加的域名
        ip: 覆盖 IP
        alias: 条目别名

    返回:
        AddResult
    """
    kept = []
    replaced = False

    for line in lines:
        # 快速过滤：不包含域名字符串的行不可能重复
        if domain not in line:
            kept.append(line)
            continue

        if is_duplicate(line, domain):
            replaced = True
            continue

        kept.append(line)

    entry_line = encode(ManagedEntry(ip=ip, domain=domain, alias=alias, active=True))
    kept.append(entry_line)

    return AddResult(lines=kept, replaced=replaced, entry_line=entry_line)
