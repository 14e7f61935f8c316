# Unless explicitly stated otherwise all files in this repository are licensed under the the Apache License Version 2.0.
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2021 Datadog, Inc.

# singletons
from sample_traces._context import context
from sample_traces._scenarios import scenarios
from sample_traces._logger import logger
from sample_traces._models import Tag, Span, Trace, TraceQueryResult, TraceDecodeError
from sample_traces._jaeger import get_trace, get_trace_with_retry
from sample_traces._sample_api import invoke_sample_api

__all__ = [
    "Span",
    "Tag",
    "Trace",
    "TraceDecodeError",
    "TraceQueryResult",
    "context",
    "get_trace",
    "get_trace_with_retry",
    "invoke_sample_api",
    "logger",
    "scenarios",
]
