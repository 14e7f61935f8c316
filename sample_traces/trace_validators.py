# Unless explicitly stated otherwise all files in this repository are licensed under the the Apache License Version 2.0.
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2021 Datadog, Inc.

from sample_traces._models import Span, Tag, Trace


EXPECTED_SPAN_NAME = "HelloWorldSpan"
EXPECTED_TAG = Tag(key="foo", value="bar")
EXPECTED_RESPONSE = "Hello world!"


# Spans are not ordered in a Jaeger trace. If several spans match, the last one wins
def find_span(trace: Trace, operation_name: str) -> Span | None:
    result = None
    for span in trace.spans:
        if span.operation_name == operation_name:
            result = span

    return result


def assert_span_has_tag(span: Span, tag: Tag) -> None:
    assert tag in span.tags, f"Span does not contain tag '{tag}'"
