"""
muko - 在 DEV 覆盖与 PROD 真实解析之间切换 hosts 文件条目
"""

__version__ = "1.0.0"
__author__ = "muko Project"

from muko.app import MukoApp
from muko.config import Config
from muko.errors import EntryNotFoundError, MukoError
from muko.models import ManagedEntry

__all__ = ["MukoApp", "Config", "ManagedEntry", "MukoError", "EntryNotFoundError"]
