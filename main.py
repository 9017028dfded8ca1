#!/usr/bin/env python3
"""
muko - 主入口点

管理 /etc/hosts 中带 #muko: 标记的条目。
"""

import sys
from pathlib import Path

# 将当前目录添加到路径以导入 muko 模块
sys.path.insert(0, str(Path(__file__).parent))

from muko.cli import main


if __name__ == '__main__':
    main()
