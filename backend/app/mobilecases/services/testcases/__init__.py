"""MobileCases - TestCase Store Service

核心组件：
- parser: YAML 解析与规则校验
- store: 目录存储（save / list / get / delete / run_suite）
- errors: 异常体系
"""

from mobilecases.services.testcases.errors import (
    MissingFieldError,
    NotFoundError,
    ParseError,
    StoreIOError,
    TestCaseError,
    ValidationError,
)
from mobilecases.services.testcases.parser import (
    VALID_PRIORITIES,
    collect_violations,
    load_testcase,
    parse_testcase,
    validate_testcase,
)
from mobilecases.services.testcases.store import (
    DEFAULT_EXTENSION,
    RECOGNIZED_EXTENSIONS,
    ScanResult,
    TestCaseStore,
    delete_testcase,
    normalize_filename,
    read_testcase,
    render_suite_report,
)

__all__ = [
    # Errors
    "MissingFieldError",
    "NotFoundError",
    "ParseError",
    "StoreIOError",
    "TestCaseError",
    "ValidationError",
    # Parser
    "VALID_PRIORITIES",
    "collect_violations",
    "load_testcase",
    "parse_testcase",
    "validate_testcase",
    # Store
    "DEFAULT_EXTENSION",
    "RECOGNIZED_EXTENSIONS",
    "ScanResult",
    "TestCaseStore",
    "delete_testcase",
    "normalize_filename",
    "read_testcase",
    "render_suite_report",
]
