"""
muko 主应用模块
"""

import logging
import sys
import time
from typing import Callable, List, Optional

from muko.config import Config
from muko.hosts_manager import HostsFileManager
from muko.mode_switch import set_mode
from muko.models import ManagedEntry
from muko.registrar import AddResult, add_domain
from muko.resolver import DomainResolver, RetryPolicy


class MukoApp:
    """
    主应用控制器，协调所有组件

    每个操作都遵循同一流程：
    - 一次性读取整个 hosts 文件
    - 在内存中构建新的行列表
    - 对修改类操作，最后一次性写回
    任何一步失败都不会写入，原文件保持不变。
    """

    def __init__(
        self,
        config: Config,
        lookup: Optional[Callable[[str], Optional[str]]] = None,
        sleep: Callable[[float], None] = time.sleep
    ):
        """
        初始化 muko 应用

        参数:
            config: 应用配置
            lookup: 域名查询函数（默认使用系统解析器）
            sleep: 重试等待函数

        异常:
            ValueError: 如果配置无效
        """
        self.config = config
        self.config.validate()

        self.logger = self._setup_logging()

        self.hosts_manager = HostsFileManager(
            config.hosts_file_path,
            self.logger
        )
        policy = RetryPolicy(
            max_attempts=config.dns_attempts,
            delay=config.dns_retry_delay
        )
        self.resolver = DomainResolver(
            lookup=lookup,
            policy=policy,
            sleep=sleep,
            logger=self.logger
        )

    def _setup_logging(self) -> logging.Logger:
        """
        配置日志系统

        返回:
            配置好的日志记录器实例
        """
        logger = logging.getLogger('muko')
        logger.setLevel(self.config.log_level)

        # 避免重复的处理器
        if logger.handlers:
            return logger

        # 输出到 stderr，stdout 留给表格
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(self.config.log_level)

        # 格式: 时间戳 - 名称 - 级别 - 消息
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)

        logger.addHandler(handler)
        return logger

    def add(self, domain: str, ip: Optional[str] = None, alias: Optional[str] = None) -> AddResult:
        """
        添加或覆盖一个域名的 DEV 条目

        参数:
            domain: 域名
            ip: 覆盖 IP（默认使用配置中的 default_ip）
            alias: 别名（默认与域名相同）

        返回:
            AddResult
        """
        ip = ip or self.config.default_ip
        alias = alias or domain

        lines = self.hosts_manager.read_lines()
        result = add_domain(lines, domain, ip, alias)
        self.hosts_manager.write_lines(result.lines)

        if result.replaced:
            self.logger.info(f"已覆盖域名 {domain} 的旧条目")
        else:
            self.logger.info(f"已添加域名 {domain}")
        return result

    def set_mode(self, identifier: str, dev_mode: bool) -> None:
        """
        将域名切换到 DEV 或 PROD 模式

        参数:
            identifier: 域名或别名
            dev_mode: True 为 DEV（取消注释），False 为 PROD（注释掉）

        异常:
            EntryNotFoundError: 如果找不到匹配的条目（此时不写入文件）
        """
        lines = self.hosts_manager.read_lines()
        new_lines = set_mode(lines, identifier, dev_mode, self.logger)
        self.hosts_manager.write_lines(new_lines)

        mode_name = "DEV" if dev_mode else "PROD"
        self.logger.info(f"已将 {identifier} 切换到 {mode_name} 模式")

    def report(self) -> List[ManagedEntry]:
        """
        列出所有管理条目，PROD 模式的条目附带解析出的生产 IP

        返回:
            按文件顺序排列的条目列表
        """
        lines = self.hosts_manager.read_lines()
        return self.resolver.report(lines)
