"""
muko 数据模型
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ManagedEntry:
    """
    代表 hosts 文件中一条 muko 管理的条目

    每次操作都从 hosts 文件重新解析，不在内存中持久保存。

    属性:
        ip: 行内的 IP 地址（DEV 模式下生效的覆盖 IP）
        domain: 要映射的主机名
        alias: 标记后的别名，没有时为 None
        active: 行未被注释时为 True（DEV 模式）
        prod_ip: 仅在 PROD 模式下通过 DNS 解析得到的真实 IP
    """

    ip: str
    domain: str
    alias: Optional[str] = None
    active: bool = True
    prod_ip: Optional[str] = None

    @property
    def mode(self) -> str:
        """当前模式名称：DEV 或 PROD"""
        return "DEV" if self.active else "PROD"

    @property
    def display_alias(self) -> str:
        # 别名与域名相同时不重复显示
        if self.alias and self.alias != self.domain:
            return self.alias
        return ""

    @property
    def display_prod_ip(self) -> str:
        if self.active:
            return ""
        return self.prod_ip or "-"

    def to_hosts_line(self) -> str:
        """
        转换为 hosts 文件行格式

        格式: [#]<IP> <主机名> #muko: <别名>

        返回:
            格式化的 hosts 文件行
        """
        from muko.codec import encode

        return encode(self)

    def __str__(self) -> str:
        return f"{self.domain} -> {self.ip} ({self.mode})"
