"""
muko 异常定义
"""


class MukoError(Exception):
    """muko 核心操作报告的错误基类"""


class EntryNotFoundError(MukoError):
    """
    模式切换时找不到匹配的 muko 管理条目

    属性:
        identifier: 用户给出的域名或别名
    """

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"No muko-managed entry found for '{identifier}'")


class HostsFileError(MukoError):
    """hosts 文件内容无法解码"""
