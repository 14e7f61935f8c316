# Unless explicitly stated otherwise all files in this repository are licensed under the the Apache License Version 2.0.
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2021 Datadog, Inc.

"""
Trace data structures, as returned by the Jaeger query API (GET /api/traces).

Only the fields the tests look at are decoded, anything else in the payload is ignored.
Missing strings decode to "" and missing lists to (), a field of the wrong JSON type is a decode error.
"""

from dataclasses import dataclass
from typing import Any


TagValue = str | int | float | bool


class TraceDecodeError(ValueError):
    """The Jaeger payload does not have the expected shape"""


def _value_kind(value: TagValue) -> str:
    # bool is a subclass of int, it must be checked first
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    return "string"


def _get_object(data: Any, what: str) -> dict:  # noqa: ANN401
    if not isinstance(data, dict):
        raise TraceDecodeError(f"Expected a JSON object for {what}, got {type(data).__name__}")
    return data


def _get_str(data: dict, key: str, what: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TraceDecodeError(f"Expected a string for {what}.{key}, got {type(value).__name__}")
    return value


def _get_list(data: dict, key: str, what: str) -> list:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TraceDecodeError(f"Expected a list for {what}.{key}, got {type(value).__name__}")
    return value


@dataclass(frozen=True, eq=False)
class Tag:
    key: str
    value: TagValue

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tag):
            return NotImplemented

        return (
            self.key == other.key
            and _value_kind(self.value) == _value_kind(other.value)
            and self.value == other.value
        )

    def __hash__(self) -> int:
        return hash((self.key, _value_kind(self.value), self.value))

    def __str__(self) -> str:
        return f"{self.key}:{self.value}"

    @staticmethod
    def from_json(data: Any) -> "Tag":  # noqa: ANN401
        data = _get_object(data, "tag")
        value = data.get("value")

        if not isinstance(value, (str, int, float, bool)):
            raise TraceDecodeError(
                f"Tag value must be a string, a number or a boolean, got {type(value).__name__} "
                f"for key {data.get('key')!r}"
            )

        return Tag(key=_get_str(data, "key", "tag"), value=value)

    def to_json(self) -> dict:
        return {"key": self.key, "value": self.value}


@dataclass(frozen=True)
class Span:
    trace_id: str
    span_id: str
    operation_name: str
    tags: tuple[Tag, ...] = ()

    def __post_init__(self) -> None:
        # callers may give any iterable, the span keeps its own immutable copy
        object.__setattr__(self, "tags", tuple(self.tags))

    @staticmethod
    def from_json(data: Any) -> "Span":  # noqa: ANN401
        data = _get_object(data, "span")

        return Span(
            trace_id=_get_str(data, "traceID", "span"),
            span_id=_get_str(data, "spanID", "span"),
            operation_name=_get_str(data, "operationName", "span"),
            tags=tuple(Tag.from_json(tag) for tag in _get_list(data, "tags", "span")),
        )

    def to_json(self) -> dict:
        return {
            "traceID": self.trace_id,
            "spanID": self.span_id,
            "operationName": self.operation_name,
            "tags": [tag.to_json() for tag in self.tags],
        }


@dataclass(frozen=True)
class Trace:
    trace_id: str
    spans: tuple[Span, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "spans", tuple(self.spans))

    @staticmethod
    def from_json(data: Any) -> "Trace":  # noqa: ANN401
        data = _get_object(data, "trace")

        return Trace(
            trace_id=_get_str(data, "traceID", "trace"),
            spans=tuple(Span.from_json(span) for span in _get_list(data, "spans", "trace")),
        )

    def to_json(self) -> dict:
        return {"traceID": self.trace_id, "spans": [span.to_json() for span in self.spans]}


@dataclass(frozen=True)
class TraceQueryResult:
    traces: tuple[Trace, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "traces", tuple(self.traces))

    @staticmethod
    def from_json(data: Any) -> "TraceQueryResult":  # noqa: ANN401
        data = _get_object(data, "response")

        return TraceQueryResult(traces=tuple(Trace.from_json(trace) for trace in _get_list(data, "data", "response")))

    def to_json(self) -> dict:
        return {"data": [trace.to_json() for trace in self.traces]}
