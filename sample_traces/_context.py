# Unless explicitly stated otherwise all files in this repository are licensed under the the Apache License Version 2.0.
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2021 Datadog, Inc.

"""singleton exposing all about test context"""

import os

from sample_traces._scenarios import Scenario, scenarios
from sample_traces.const import DEFAULT_SAMPLE, SAMPLE_ENV_VAR


def resolve_sample(option: str | None) -> str:
    """--sample wins, then the environment, then the default"""
    if option:
        return option

    return os.environ.get(SAMPLE_ENV_VAR, DEFAULT_SAMPLE)


class _Context:
    """Exposes the running scenario and the sample app the traces are queried for.
    Both are set by pytest_configure, defaults are there for code running outside of a session.
    """

    scenario: Scenario = scenarios.default
    sample: str = DEFAULT_SAMPLE

    def serialize(self) -> dict:
        return {"scenario": self.scenario.name, "sample": self.sample}


context = _Context()
