# Copyright (c) 2025 Scott Wilcox
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Data model for test collections and results.

Definitions are parsed from the authored (camelCase) form with ``from_dict``;
results serialise back to that form with ``to_dict`` for reporters.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from mcpspec.errors import ConfigurationError
from mcpspec.utils.jsonpath import UNDEFINED


class AssertionKind(str, Enum):
    """The closed set of assertion kinds."""

    SCHEMA = "schema"
    EQUALS = "equals"
    CONTAINS = "contains"
    EXISTS = "exists"
    MATCHES = "matches"
    TYPE = "type"
    LENGTH = "length"
    LATENCY = "latency"
    MIME_TYPE = "mimeType"
    EXPRESSION = "expression"


class TestStatus(str, Enum):
    """Verdict of a single test."""

    __test__ = False

    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"
    SKIPPED = "skipped"


def _json_value(value: Any) -> Any:
    """Render UNDEFINED as None so results stay JSON serialisable."""
    if value is UNDEFINED:
        return None
    if isinstance(value, dict):
        return {key: _json_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_value(item) for item in value]
    return value


@dataclass(frozen=True)
class AssertionDefinition:
    """One assertion; only the fields its kind needs are set."""

    kind: AssertionKind
    path: Optional[str] = None
    value: Any = None
    expected: Any = None
    pattern: Optional[str] = None
    max_ms: Optional[int] = None
    operator: Optional[str] = None
    expr: Optional[str] = None
    schema: Optional[Dict[str, Any]] = None

    @property
    def expected_value(self) -> Any:
        """The comparison target, authored as either ``value`` or ``expected``."""
        return self.value if self.value is not None else self.expected

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AssertionDefinition":
        kind_name = data.get("type")
        try:
            kind = AssertionKind(kind_name)
        except ValueError:
            raise ConfigurationError(f"Unknown assertion type: {kind_name!r}") from None
        return cls(
            kind=kind,
            path=data.get("path"),
            value=data.get("value"),
            expected=data.get("expected"),
            pattern=data.get("pattern"),
            max_ms=data.get("maxMs"),
            operator=data.get("operator"),
            expr=data.get("expr"),
            schema=data.get("schema"),
        )


@dataclass(frozen=True)
class SimpleExpectation:
    """Shorthand expectation: exists, equals, contains or matches."""

    KINDS = ("exists", "equals", "contains", "matches")

    kind: str
    path: str = "$"
    value: Any = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SimpleExpectation":
        if len(data) != 1:
            raise ConfigurationError(f"Expectation must have exactly one key, got: {sorted(data)}")
        kind, args = next(iter(data.items()))
        if kind not in cls.KINDS:
            raise ConfigurationError(f"Unknown expectation type: {kind!r}")
        if kind == "exists":
            return cls(kind=kind, path=args or "$")
        if not isinstance(args, (list, tuple)) or len(args) != 2:
            raise ConfigurationError(f"Expectation {kind!r} takes [path, value], got: {args!r}")
        path, value = args
        return cls(kind=kind, path=path or "$", value=value)

    def to_assertion(self) -> AssertionDefinition:
        """The equivalent full assertion definition."""
        kind = AssertionKind(self.kind)
        if kind is AssertionKind.MATCHES:
            return AssertionDefinition(kind=kind, path=self.path, pattern=self.value)
        return AssertionDefinition(kind=kind, path=self.path, value=self.value)


@dataclass(frozen=True)
class ExtractionDefinition:
    """Capture the value at ``path`` into the variable ``name``."""

    name: str
    path: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ExtractionDefinition":
        if "name" not in data or "path" not in data:
            raise ConfigurationError(f"Extraction needs 'name' and 'path', got: {dict(data)!r}")
        return cls(name=data["name"], path=data["path"])


@dataclass(frozen=True)
class TestDefinition:
    """A declarative test: which tool to call, with what, and what to expect."""

    __test__ = False

    name: str
    id: Optional[str] = None
    tags: Tuple[str, ...] = ()
    timeout: Optional[int] = None
    retries: Optional[int] = None
    tool: Optional[str] = None
    input: Dict[str, Any] = field(default_factory=dict)
    assertions: Optional[List[AssertionDefinition]] = None
    expect: Optional[List[SimpleExpectation]] = None
    expect_error: bool = False
    extract: Optional[List[ExtractionDefinition]] = None

    @property
    def test_id(self) -> str:
        return self.id if self.id is not None else self.name

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TestDefinition":
        if not data.get("name"):
            raise ConfigurationError(f"Test definition has no name: {dict(data)!r}")

        def _parse_list(key, parser):
            items = data.get(key)
            if items is None:
                return None
            return [parser(item) for item in items]

        return cls(
            name=data["name"],
            id=data.get("id"),
            tags=tuple(data.get("tags") or ()),
            timeout=data.get("timeout"),
            retries=data.get("retries"),
            tool=data.get("call") or data.get("tool"),
            input=dict(data.get("with") or data.get("input") or {}),
            assertions=_parse_list("assertions", AssertionDefinition.from_dict),
            expect=_parse_list("expect", SimpleExpectation.from_dict),
            expect_error=bool(data.get("expectError", False)),
            extract=_parse_list("extract", ExtractionDefinition.from_dict),
        )


@dataclass
class AssertionResult:
    """Outcome of one assertion; ``message`` is always set."""

    kind: Union[AssertionKind, str]
    passed: bool
    message: str
    expected: Any = None
    actual: Any = None

    def to_dict(self) -> Dict[str, Any]:
        kind = self.kind.value if isinstance(self.kind, AssertionKind) else self.kind
        result = {"type": kind, "passed": self.passed, "message": self.message}
        if self.expected is not None:
            result["expected"] = _json_value(self.expected)
        if self.actual is not None:
            result["actual"] = _json_value(self.actual)
        return result


@dataclass
class TestResult:
    """Verdict of a single test."""

    __test__ = False

    test_id: str
    test_name: str
    status: TestStatus
    duration: int
    assertions: List[AssertionResult] = field(default_factory=list)
    error: Optional[str] = None
    extracted_variables: Optional[Dict[str, Any]] = None

    @classmethod
    def skipped(cls, test: TestDefinition) -> "TestResult":
        return cls(test_id=test.test_id, test_name=test.name, status=TestStatus.SKIPPED, duration=0)

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "testId": self.test_id,
            "testName": self.test_name,
            "status": self.status.value,
            "duration": self.duration,
            "assertions": [assertion.to_dict() for assertion in self.assertions],
        }
        if self.error is not None:
            result["error"] = self.error
        if self.extracted_variables is not None:
            result["extractedVariables"] = _json_value(self.extracted_variables)
        return result


@dataclass
class TestSummary:
    """Counts by status for a run."""

    __test__ = False

    total: int = 0
    passed: int = 0
    failed: int = 0
    skipped: int = 0
    errors: int = 0
    duration: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "skipped": self.skipped,
            "errors": self.errors,
            "duration": self.duration,
        }


@dataclass
class TestRunResult:
    """All results of one collection run, in definition order."""

    __test__ = False

    id: str
    collection_name: str
    started_at: datetime
    completed_at: datetime
    duration: int
    results: List[TestResult]
    summary: TestSummary

    @property
    def success(self) -> bool:
        return self.summary.failed == 0 and self.summary.errors == 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "collectionName": self.collection_name,
            "startedAt": self.started_at.isoformat(),
            "completedAt": self.completed_at.isoformat(),
            "duration": self.duration,
            "summary": self.summary.to_dict(),
            "results": [result.to_dict() for result in self.results],
        }


@dataclass
class CollectionDefinition:
    """A named list of tests plus the environments they can run in."""

    name: str
    tests: List[TestDefinition]
    description: Optional[str] = None
    server: Any = None
    environments: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    default_environment: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CollectionDefinition":
        if not isinstance(data, Mapping):
            raise ConfigurationError("Collection must be a mapping")
        if not data.get("name"):
            raise ConfigurationError("Collection has no name")
        if not isinstance(data.get("tests"), list):
            raise ConfigurationError(f"Collection {data['name']!r} has no 'tests' list")

        environments = {}
        for env_name, env in (data.get("environments") or {}).items():
            environments[env_name] = dict((env or {}).get("variables") or {})

        return cls(
            name=data["name"],
            description=data.get("description"),
            server=data.get("server"),
            environments=environments,
            default_environment=data.get("defaultEnvironment"),
            tests=[TestDefinition.from_dict(test) for test in data["tests"]],
        )
