"""MobileCases - TestCase Store

目录即存储：一个 YAML 文件对应一条测试用例。
每次操作都重新读取磁盘，不做内存索引或缓存。
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from mobilecases.models.testcase_schemas import (
    StoredTestCase,
    SuiteEntry,
    TestCaseSummary,
)
from mobilecases.services.testcases.errors import (
    NotFoundError,
    StoreIOError,
    TestCaseError,
)
from mobilecases.services.testcases.parser import parse_testcase

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".yaml"
RECOGNIZED_EXTENSIONS = (".yaml", ".yml")


def has_recognized_extension(filename: str) -> bool:
    return filename.endswith(RECOGNIZED_EXTENSIONS)


def normalize_filename(filename: str) -> str:
    """已带 .yaml/.yml 后缀则原样返回，否则追加 .yaml"""
    if has_recognized_extension(filename):
        return filename
    return f"{filename}{DEFAULT_EXTENSION}"


@dataclass(frozen=True)
class ScanResult:
    """批量扫描中单个文件的结果：成功时 stored 有值，失败时 error 有值"""
    path: Path
    stored: StoredTestCase | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.stored is not None


# ============================================================
# 单文件操作（get / delete / run）
# ============================================================

def read_testcase(path: str | Path) -> StoredTestCase:
    """读取并校验单个测试用例文件

    Raises:
        NotFoundError: 文件不存在或不可读
        ParseError / ValidationError: 内容非法
    """
    p = Path(path)
    try:
        # newline="" 保留原始换行符，保证读写字节一致
        with open(p, "r", encoding="utf-8", newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise NotFoundError(str(path)) from e

    testcase = parse_testcase(content)
    return StoredTestCase(path=p, content=content, testcase=testcase)


def delete_testcase(path: str | Path) -> None:
    """删除测试用例文件（删除前不校验内容）"""
    p = Path(path)
    if not p.exists():
        raise NotFoundError(str(path))

    try:
        p.unlink()
    except FileNotFoundError as e:
        raise NotFoundError(str(path)) from e
    except OSError as e:
        raise StoreIOError(f"Failed to delete: {path}", path=str(path)) from e

    logger.info(f"Deleted test case {p}")


# ============================================================
# 目录操作（save / list / run_suite）
# ============================================================

class TestCaseStore:
    """
    root 指向测试用例目录（默认 ./testcases），只扫描一层，不递归子目录。
    """

    __test__ = False

    def __init__(self, root: str | Path):
        self.root = Path(root)

    def save(self, filename: str, content: str) -> Path:
        """校验后原样写入 content，同名文件直接覆盖"""
        tc = parse_testcase(content)

        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreIOError(
                f"Failed to create directory: {self.root}", path=str(self.root)
            ) from e

        full_path = self.root / normalize_filename(filename)
        try:
            full_path.write_text(content, encoding="utf-8", newline="")
        except OSError as e:
            raise StoreIOError(
                f"Failed to write test case file: {full_path}", path=str(full_path)
            ) from e

        logger.info(f"Saved test case {tc.id} to {full_path}")
        return full_path

    def _entries(self) -> list[Path]:
        try:
            entries = [
                p
                for p in self.root.iterdir()
                if p.is_file() and has_recognized_extension(p.name)
            ]
        except OSError as e:
            raise StoreIOError(
                f"Failed to read directory: {self.root}", path=str(self.root)
            ) from e
        return sorted(entries, key=lambda p: p.name)

    def scan(self) -> Iterator[ScanResult]:
        """按文件名排序逐个解析；单个文件失败不会中断整个扫描"""
        for path in self._entries():
            try:
                stored = read_testcase(path)
            except TestCaseError as e:
                logger.debug(f"Skipping {path}: {e}")
                yield ScanResult(path=path, error=e)
                continue
            yield ScanResult(path=path, stored=stored)

    def _valid_cases(self) -> list[StoredTestCase]:
        return [r.stored for r in self.scan() if r.stored is not None]

    def list_cases(self, platform: Optional[str] = None) -> list[TestCaseSummary]:
        """列出目录中合法的测试用例；目录不存在时返回空列表"""
        if not self.root.exists():
            return []

        summaries: list[TestCaseSummary] = []
        for stored in self._valid_cases():
            if platform and stored.testcase.platform.lower() != platform.lower():
                continue
            summaries.append(TestCaseSummary.from_stored(stored))
        return summaries

    def load_suite(self, ids: Sequence[str]) -> list[SuiteEntry]:
        """按 ids 顺序组装套件

        - 每个 id 取排序后第一个匹配的文件（允许重复 id）
        - 未匹配的 id 直接忽略
        """
        if not self.root.exists():
            raise NotFoundError(str(self.root), kind="Directory")

        cases = self._valid_cases()
        suite: list[SuiteEntry] = []
        for case_id in ids:
            match = next((c for c in cases if c.testcase.id == case_id), None)
            if match is None:
                logger.debug(f"No test case matched id {case_id}")
                continue
            suite.append(
                SuiteEntry(id=match.testcase.id, name=match.path.name, content=match.content)
            )
        return suite


def render_suite_report(entries: Sequence[SuiteEntry]) -> str:
    """套件报告：JSON 数组，缩进 2"""
    return json.dumps(
        [e.model_dump() for e in entries],
        ensure_ascii=False,
        indent=2,
    )
