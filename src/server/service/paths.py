# -*- coding: utf-8 -*-
"""
统一的路径管理服务。

文件功能:
    - 解析结果文件的实际路径。

公开接口:
    - get_working_dir(): 获取当前工作目录。
    - resolve_output_path(output_file): 相对路径基于当前工作目录解析为绝对路径。
"""

from pathlib import Path
from typing import Union


def get_working_dir() -> Path:
    """获取当前工作目录，结果文件默认写在这里。"""
    return Path.cwd()


def resolve_output_path(output_file: Union[str, Path]) -> Path:
    """将结果文件路径解析为绝对路径。

    绝对路径原样返回（展开 ~），相对路径拼接在当前工作目录之后。
    """
    path = Path(output_file).expanduser()
    if path.is_absolute():
        return path
    return get_working_dir() / path
