"""
DEV / PROD 模式切换模块
"""

import logging
from typing import List, Optional

from muko.codec import decode
from muko.errors import EntryNotFoundError


def set_mode(
    lines: List[str],
    identifier: str,
    want_active: bool,
    logger: Optional[logging.Logger] = None
) -> List[str]:
    """
    切换匹配条目的注释状态，返回新的行列表

    只对匹配的行做最小修改（加上或去掉开头的 #），
    其余行原样保留，包括空白和顺序。

    参数:
        lines: hosts 文件的全部行
        identifier: 域名或别名
        want_active: True 为 DEV 模式（取消注释），False 为 PROD 模式（注释掉）
        logger: 可选的日志记录器

    返回:
        修改后的行列表（输入列表不会被修改）

    异常:
        EntryNotFoundError: 如果没有任何管理条目匹配 identifier
    """
    result = []
    found = False

    for line in lines:
        entry = decode(line)
        if entry is None or identifier not in (entry.domain, entry.alias):
            result.append(line)
            continue

        found = True
        if want_active and not entry.active:
            # 去掉一个 # 及其后的空白，其余部分保持原样
            result.append(line[1:].lstrip())
        elif not want_active and entry.active:
            result.append(f"#{line}")
        else:
            result.append(line)

        if logger:
            logger.debug(f"切换条目 {entry.domain} -> {'DEV' if want_active else 'PROD'}")

    if not found:
        raise EntryNotFoundError(identifier)

    return result
