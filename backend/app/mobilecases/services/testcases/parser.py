"""MobileCases - TestCase Parser

YAML 文本 -> TestCase，并按固定顺序校验（遇到第一个错误即失败）。
"""

from __future__ import annotations

import logging

import pydantic
import yaml

from mobilecases.models.testcase_schemas import TestCase
from mobilecases.services.testcases.errors import (
    MissingFieldError,
    ParseError,
    ValidationError,
)

logger = logging.getLogger(__name__)

VALID_PRIORITIES = ("critical", "high", "medium", "low")

REQUIRED_FIELDS = (
    "id",
    "name",
    "platform",
    "priority",
    "tags",
    "author",
    "created_at",
    "description",
    "steps",
)


def _format_pydantic_error(exc: pydantic.ValidationError) -> str:
    err = exc.errors()[0]
    loc = ".".join(str(part) for part in err.get("loc", ()))
    return f"Invalid field '{loc}': {err.get('msg', 'invalid value')}"


def load_testcase(content: str) -> TestCase:
    """仅做结构解析（YAML + 字段形状），不做规则校验"""
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ParseError(f"Malformed YAML: {e}") from e

    if not isinstance(data, dict):
        raise ParseError(
            f"YAML must be a mapping (object), got: {type(data).__name__}"
        )

    for field in REQUIRED_FIELDS:
        if data.get(field) is None:
            raise MissingFieldError(field)

    try:
        return TestCase.model_validate(data)
    except pydantic.ValidationError as e:
        raise ParseError(_format_pydantic_error(e)) from e


def collect_violations(tc: TestCase) -> list[str]:
    """按校验顺序返回全部违规信息（空列表表示合法）"""
    violations: list[str] = []

    for field in ("id", "name", "platform", "description"):
        if not getattr(tc, field).strip():
            violations.append(f"{field} must not be empty")

    if tc.priority.lower() not in VALID_PRIORITIES:
        violations.append(f"priority must be one of: {', '.join(VALID_PRIORITIES)}")

    if not tc.steps:
        violations.append("steps must not be empty")

    for i, step in enumerate(tc.steps, start=1):
        if not step.action.strip():
            violations.append(f"Step {i}: action must not be empty")
        if not step.expected.strip():
            violations.append(f"Step {i}: expected must not be empty")

    return violations


def validate_testcase(tc: TestCase) -> None:
    """校验测试用例，遇到第一个违规即抛出 ValidationError"""
    violations = collect_violations(tc)
    if violations:
        raise ValidationError(violations[0])


def parse_testcase(content: str) -> TestCase:
    """解析并校验 YAML 文本

    Raises:
        ParseError: YAML 不合法或字段结构不匹配
        ValidationError: 违反校验规则
    """
    tc = load_testcase(content)
    validate_testcase(tc)
    return tc
