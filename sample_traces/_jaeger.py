# Unless explicitly stated otherwise all files in this repository are licensed under the the Apache License Version 2.0.
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2021 Datadog, Inc.

"""Fetch traces of a sample app from the Jaeger query API"""

import time

import pytest
import requests

from sample_traces._logger import logger
from sample_traces._models import Trace, TraceDecodeError, TraceQueryResult


JAEGER_QUERY_URL = "http://localhost:16686/api/traces"
TIMEOUT = 10

# seconds to wait after each empty answer, 14s in total
BACKOFF_SCHEDULE = (1, 3, 10)


def get_trace(sample: str) -> Trace | None:
    """Returns the first trace Jaeger knows for the sample service, or None if there is none yet.

    If Jaeger holds several traces for the service, which one comes first is up to Jaeger.
    """

    logger.info(f"Going to call Jaeger to fetch trace for sample: {sample}")

    try:
        r = requests.get(JAEGER_QUERY_URL, params={"service": sample}, timeout=TIMEOUT)
    except requests.RequestException as e:
        pytest.fail(f"Failed getting trace from Jaeger ({JAEGER_QUERY_URL}): {e}", pytrace=False)

    logger.info(f"Received {r.status_code} response from Jaeger")

    try:
        result = TraceQueryResult.from_json(r.json())
    except (requests.RequestException, TraceDecodeError) as e:
        # requests.JSONDecodeError is a RequestException
        pytest.fail(f"Failed decoding json response from Jaeger: {e}", pytrace=False)
    finally:
        r.close()

    logger.json("Data received from Jaeger", result.to_json())

    if len(result.traces) == 0:
        return None

    return result.traces[0]


def get_trace_with_retry(sample: str) -> Trace:
    """Poll Jaeger until it has indexed a trace for the sample, following BACKOFF_SCHEDULE.

    An empty answer is expected while Jaeger ingests the trace, but if nothing shows up once the
    schedule is exhausted, the traced operation is considered broken and the test fails.
    """

    for backoff in BACKOFF_SCHEDULE:
        trace = get_trace(sample)

        if trace is not None:
            return trace

        logger.info(f"Trace not found yet, retrying in {backoff}s")
        time.sleep(backoff)

    pytest.fail(
        f"Failed getting trace from Jaeger for sample {sample} after {len(BACKOFF_SCHEDULE)} attempts "
        f"({sum(BACKOFF_SCHEDULE)}s)",
        pytrace=False,
    )
