# -*- coding: utf-8 -*-
"""
导出流程的致命错误类型

所有致命错误都继承 ExportError，并携带一个 FatalKind，
由协调器转换为 ExportResult，是否终止进程由最外层入口决定。
"""

from enum import Enum


class FatalKind(str, Enum):
    TRANSPORT = "transport"
    BODY_READ = "body_read"
    DECODE = "decode"
    WRITE = "write"


class ExportError(RuntimeError):
    """导出流程中的致命错误"""

    def __init__(self, kind: FatalKind, message: str):
        super().__init__(message)
        self.kind = kind


class FetchError(ExportError):
    """网络请求失败或响应体读取失败"""


class DecodeError(ExportError):
    def __init__(self, message: str):
        super().__init__(FatalKind.DECODE, message)


class WriteError(ExportError):
    def __init__(self, message: str):
        super().__init__(FatalKind.WRITE, message)
