"""
配置管理模块，支持环境变量
"""

import os
import platform
from dataclasses import dataclass


def default_hosts_path() -> str:
    """当前平台的系统 hosts 文件路径"""
    if platform.system() == "Windows":
        system_root = os.getenv("SystemRoot", r"C:\Windows")
        return os.path.join(system_root, "System32", "drivers", "etc", "hosts")
    return "/etc/hosts"


@dataclass
class Config:
    """应用配置类，从环境变量加载配置"""

    hosts_file_path: str = "/etc/hosts"
    default_ip: str = "127.0.0.1"
    dns_attempts: int = 3
    dns_retry_delay: float = 0.1
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Config":
        """
        从环境变量加载配置

        环境变量说明:
            MUKO_HOSTS_FILE: hosts 文件路径 (默认: 系统 hosts 文件)
            MUKO_DEFAULT_IP: add 命令的默认 IP (默认: 127.0.0.1)
            MUKO_DNS_ATTEMPTS: DNS 解析最大尝试次数 (默认: 3)
            MUKO_DNS_RETRY_DELAY: 两次解析之间的等待秒数 (默认: 0.1)
            LOG_LEVEL: 日志级别 (默认: WARNING)

        异常:
            ValueError: 如果数值型环境变量无法解析
        """
        return cls(
            hosts_file_path=os.getenv("MUKO_HOSTS_FILE", default_hosts_path()),
            default_ip=os.getenv("MUKO_DEFAULT_IP", "127.0.0.1"),
            dns_attempts=int(os.getenv("MUKO_DNS_ATTEMPTS", "3")),
            dns_retry_delay=float(os.getenv("MUKO_DNS_RETRY_DELAY", "0.1")),
            log_level=os.getenv("LOG_LEVEL", "WARNING").upper()
        )

    def validate(self) -> None:
        """验证配置是否有效"""
        valid_log_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.log_level not in valid_log_levels:
            raise ValueError(
                f"无效的 LOG_LEVEL: {self.log_level}. "
                f"必须是以下之一: {', '.join(sorted(valid_log_levels))}"
            )
        if self.dns_attempts < 1:
            raise ValueError(f"无效的 MUKO_DNS_ATTEMPTS: {self.dns_attempts}. 必须至少为 1")
        if self.dns_retry_delay < 0:
            raise ValueError(f"无效的 MUKO_DNS_RETRY_DELAY: {self.dns_retry_delay}. 不能为负数")
