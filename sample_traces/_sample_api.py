# Unless explicitly stated otherwise all files in this repository are licensed under the the Apache License Version 2.0.
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2021 Datadog, Inc.

import pytest
import requests

from sample_traces._logger import logger


SAMPLE_API_URL = "http://localhost:8080/helloworld"
TIMEOUT = 10


def invoke_sample_api(sample: str) -> str:
    """Call the /helloworld endpoint of the sample API, that will generate the hello world span.

    Any transport error fails the current test right away, there is no point in waiting
    for a trace if the request that should have produced it never reached the app.
    """

    logger.info(f"Going to call the sample API to generate trace for sample: {sample}")

    try:
        # streamed, so that the body is only read below
        r = requests.get(SAMPLE_API_URL, timeout=TIMEOUT, stream=True)
    except requests.RequestException as e:
        pytest.fail(f"Failed calling the helloworld endpoint in the sample API ({SAMPLE_API_URL}): {e}", pytrace=False)

    logger.info(f"Received {r.status_code} response from the sample API")

    try:
        return r.text
    except requests.RequestException as e:
        pytest.fail(f"Failed reading response body from the sample API ({SAMPLE_API_URL}): {e}", pytrace=False)
    finally:
        r.close()
