"""
Hosts 文件读写模块，支持原子性整体重写
"""

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import List

from muko.errors import HostsFileError


class HostsFileManager:
    """
    读取和重写整个 hosts 文件

    只提供"读取全部行"和"写回全部行"两个操作，不理解行的内容。
    写入使用临时文件 + 重命名，失败时原文件保持不变。
    """

    def __init__(self, hosts_path: str, logger: logging.Logger):
        """
        初始化 hosts 文件管理器

        参数:
            hosts_path: hosts 文件路径
            logger: 日志记录器实例
        """
        self.hosts_path = Path(hosts_path)
        self.logger = logger

    def read_lines(self) -> List[str]:
        """
        读取 hosts 文件的全部行（去掉行尾换行符）

        返回:
            按文件顺序排列的行列表

        异常:
            FileNotFoundError: 如果 hosts 文件不存在
            PermissionError: 如果没有读取权限
            HostsFileError: 如果文件不是有效的 UTF-8
        """
        try:
            # 只按 \n 分行，行内单独的 \r 原样保留
            with open(self.hosts_path, 'r', encoding='utf-8', newline='') as f:
                lines = f.read().split('\n')

        except UnicodeDecodeError as e:
            self.logger.error(f"hosts 文件不是有效的 UTF-8: {self.hosts_path}")
            raise HostsFileError(f"{self.hosts_path} is not valid UTF-8: {e}") from e
        except FileNotFoundError:
            self.logger.error(f"Hosts 文件不存在: {self.hosts_path}")
            raise
        except PermissionError:
            self.logger.error(f"读取 hosts 文件权限被拒绝: {self.hosts_path}")
            raise
        except OSError as e:
            self.logger.error(f"读取 hosts 文件时出错: {e}")
            raise

        if lines[-1] == '':
            lines.pop()
        lines = [line[:-1] if line.endswith('\r') else line for line in lines]

        self.logger.debug(f"从 {self.hosts_path} 读取了 {len(lines)} 行")
        return lines

    def write_lines(self, lines: List[str]) -> None:
        """
        原子性重写整个 hosts 文件

        参数:
            lines: 要写入的行（不含换行符）

        异常:
            PermissionError: 如果没有写入 hosts 文件的权限
            OSError: 如果文件系统操作失败
        """
        # 符号链接写入其指向的文件，链接本身保留
        target = self.hosts_path.resolve()

        try:
            # 1. 写入临时文件（目标文件所在目录）
            temp_fd, temp_path = tempfile.mkstemp(
                dir=target.parent,
                prefix='.hosts.tmp.',
                text=True
            )

            try:
                with os.fdopen(temp_fd, 'w', encoding='utf-8', newline='') as f:
                    f.writelines(f"{line}\n" for line in lines)

                # 2. 保留原文件权限，mkstemp 默认为 0600
                if target.exists():
                    shutil.copymode(target, temp_path)

                # 3. 原子性替换（同一文件系统内有效）
                os.replace(temp_path, target)
                self.logger.info(f"已写入 {len(lines)} 行到 {self.hosts_path}")

            except Exception:
                # 出错时清理临时文件
                if os.path.exists(temp_path):
                    os.unlink(temp_path)
                raise

        except PermissionError:
            self.logger.error(
                f"写入 hosts 文件权限被拒绝: {self.hosts_path}. "
                "请使用 sudo 或以管理员身份运行。"
            )
            raise
        except OSError as e:
            self.logger.error(f"更新 hosts 文件失败: {e}")
            raise
