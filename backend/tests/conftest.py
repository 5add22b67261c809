"""
MobileCases 测试配置

临时目录 fixture。
"""
from pathlib import Path

import pytest


@pytest.fixture
def cases_dir(tmp_path: Path) -> Path:
    """空的测试用例目录（已创建）"""
    d = tmp_path / "cases"
    d.mkdir()
    return d


@pytest.fixture
def write_case(cases_dir: Path):
    """直接写文件（绕过校验），返回路径"""

    def _write(filename: str, content: str) -> Path:
        path = cases_dir / filename
        path.write_text(content, encoding="utf-8")
        return path

    return _write
