"""MobileCases - TestCase Schemas

测试用例相关的 Pydantic 数据模型
"""
from __future__ import annotations

from datetime import date, datetime
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


def _scalar_to_str(value: Any) -> Any:
    """YAML 标量（数字、日期）转为字符串，其余原样交给 pydantic 校验"""
    if isinstance(value, bool):
        return value
    if isinstance(value, datetime):
        # 空格分隔，与 YAML 中常见写法一致
        return str(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (int, float)):
        return str(value)
    return value


# ============================================================
# Document Schemas
# ============================================================

class Step(BaseModel):
    """测试步骤"""
    model_config = ConfigDict(extra="ignore")

    action: str = Field(..., description="操作步骤")
    expected: str = Field(..., description="预期结果")

    @field_validator("action", "expected", mode="before")
    @classmethod
    def coerce_scalars(cls, v: Any) -> Any:
        return _scalar_to_str(v)


class TestCase(BaseModel):
    """测试用例文档（一个 YAML 文件对应一条）"""
    __test__ = False

    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    platform: str
    priority: str
    tags: list[str]
    author: str
    created_at: str
    linked_feature: Optional[str] = None
    last_run_status: Optional[str] = None
    description: str
    preconditions: Optional[list[str]] = None
    steps: list[Step]

    @field_validator(
        "id",
        "name",
        "platform",
        "priority",
        "author",
        "created_at",
        "linked_feature",
        "last_run_status",
        "description",
        mode="before",
    )
    @classmethod
    def coerce_scalars(cls, v: Any) -> Any:
        return _scalar_to_str(v)

    @field_validator("tags", "preconditions", mode="before")
    @classmethod
    def coerce_items(cls, v: Any) -> Any:
        if isinstance(v, list):
            return [_scalar_to_str(item) for item in v]
        return v

    def to_yaml(self) -> str:
        """序列化为 YAML；未设置的可选字段直接省略，不输出 null"""
        return yaml.safe_dump(
            self.model_dump(exclude_none=True),
            sort_keys=False,
            allow_unicode=True,
        )


# ============================================================
# Store Schemas
# ============================================================

class StoredTestCase(BaseModel):
    """磁盘上的测试用例：路径 + 原始文本 + 解析结果"""
    __test__ = False

    path: Path
    content: str
    testcase: TestCase


class TestCaseSummary(BaseModel):
    """列表中的一行摘要"""
    __test__ = False

    id: str
    name: str
    platform: str
    priority: str
    tags: list[str] = Field(default_factory=list)
    path: Path

    @classmethod
    def from_stored(cls, stored: StoredTestCase) -> "TestCaseSummary":
        tc = stored.testcase
        return cls(
            id=tc.id,
            name=tc.name,
            platform=tc.platform,
            priority=tc.priority,
            tags=tc.tags,
            path=stored.path,
        )

    def to_line(self) -> str:
        return (
            f"  {self.id} | {self.name} | {self.platform} | "
            f"{self.priority} | [{', '.join(self.tags)}]"
        )


class SuiteEntry(BaseModel):
    """套件报告中的一项（name 为文件名）"""
    id: str
    name: str
    content: str
