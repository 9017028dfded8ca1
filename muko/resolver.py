"""
收集管理条目并解析 PROD 模式下的真实 IP
"""

import logging
import socket
import time
from dataclasses import dataclass, replace
from typing import Callable, List, Optional

from muko.codec import decode
from muko.models import ManagedEntry


@dataclass(frozen=True)
class RetryPolicy:
    """
    DNS 解析的有界重试策略

    属性:
        max_attempts: 最大尝试次数
        delay: 两次尝试之间的等待秒数（最后一次之后不等待）
    """

    max_attempts: int = 3
    delay: float = 0.1


def lookup_host(domain: str) -> Optional[str]:
    """
    通过系统解析器查询域名，返回第一个地址

    参数:
        domain: 要解析的域名

    返回:
        地址字符串，无法解析时返回 None
    """
    try:
        infos = socket.getaddrinfo(domain, None)
    except (OSError, UnicodeError):
        return None

    for info in infos:
        return str(info[4][0])
    return None


def collect_entries(lines: List[str]) -> List[ManagedEntry]:
    """按文件顺序提取所有管理条目"""
    entries = []
    for line in lines:
        entry = decode(line)
        if entry is not None:
            entries.append(entry)
    return entries


class DomainResolver:
    """
    为 PROD 模式的条目解析真实 IP

    PROD 模式下覆盖行已被注释，系统解析器应返回生产 IP。
    但解析缓存可能仍返回覆盖 IP，因此在得到不同地址前会重试。
    DEV 模式的条目从不解析。
    """

    def __init__(
        self,
        lookup: Optional[Callable[[str], Optional[str]]] = None,
        policy: Optional[RetryPolicy] = None,
        sleep: Callable[[float], None] = time.sleep,
        logger: Optional[logging.Logger] = None
    ):
        """
        初始化解析器

        参数:
            lookup: 域名查询函数，默认使用系统解析器 lookup_host
            policy: 重试策略，默认 3 次、间隔 100ms
            sleep: 等待函数
            logger: 日志记录器实例
        """
        self.lookup = lookup or lookup_host
        self.policy = policy or RetryPolicy()
        self.sleep = sleep
        self.logger = logger or logging.getLogger("muko")

    def resolve(self, entry: ManagedEntry) -> ManagedEntry:
        """
        解析条目的生产 IP

        参数:
            entry: 管理条目

        返回:
            填充了 prod_ip 的新条目；DEV 模式或解析失败时 prod_ip 为 None
        """
        if entry.active:
            return entry

        resolved = None
        for attempt in range(1, self.policy.max_attempts + 1):
            address = self.lookup(entry.domain)

            if address is None:
                self.logger.debug(
                    f"解析 {entry.domain} 失败 (第 {attempt}/{self.policy.max_attempts} 次)"
                )
            elif address != entry.ip:
                resolved = address
                break
            else:
                # 仍是覆盖 IP，先保留，继续重试
                resolved = address

            if attempt < self.policy.max_attempts:
                self.sleep(self.policy.delay)

        if resolved is None:
            self.logger.info(f"无法解析 {entry.domain} 的生产 IP")

        return replace(entry, prod_ip=resolved)

    def report(self, lines: List[str]) -> List[ManagedEntry]:
        """
        提取所有管理条目并逐个解析

        参数:
            lines: hosts 文件的全部行

        返回:
            按文件顺序排列的条目列表
        """
        return [self.resolve(entry) for entry in collect_entries(lines)]
