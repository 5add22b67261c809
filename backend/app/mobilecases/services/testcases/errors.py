"""MobileCases - TestCase Errors

测试用例存储的异常体系：
- ParseError: YAML 不合法或字段结构/类型不匹配
- ValidationError: 结构合法但违反校验规则
- NotFoundError: 文件或目录不存在
- StoreIOError: 非"不存在"类的文件系统错误（权限等）
"""

from __future__ import annotations


class TestCaseError(Exception):
    """测试用例异常基类"""

    __test__ = False  # 避免被 pytest 当作测试类收集


class ParseError(TestCaseError):
    """文档解析失败"""


class ValidationError(TestCaseError):
    """校验失败（携带具体违反的规则）"""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class MissingFieldError(ParseError, ValidationError):
    """缺少必填字段

    同时属于 ParseError 与 ValidationError，两种捕获方式均可命中。
    """

    def __init__(self, field: str):
        self.field = field
        ValidationError.__init__(self, f"Missing required field: {field}")


class NotFoundError(TestCaseError):
    """文件或目录不存在"""

    def __init__(self, path: str, kind: str = "File"):
        self.path = path
        super().__init__(f"{kind} not found: {path}")


class StoreIOError(TestCaseError):
    """文件系统操作失败"""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)
