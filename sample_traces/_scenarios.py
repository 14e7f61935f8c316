# Unless explicitly stated otherwise all files in this repository are licensed under the the Apache License Version 2.0.
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2021 Datadog, Inc.

import os
from pathlib import Path
import shutil

import pytest

from sample_traces._logger import logger
from sample_traces.const import DEFAULT_SAMPLE


class Scenario:
    def __init__(self, name: str, doc: str, *, requires_sample: bool = False) -> None:
        self.name = name
        self.doc = doc
        self.requires_sample = requires_sample

        # if xdist is used, this property will be set to false for sub workers
        self.is_main_worker: bool = True

    def __call__(self, test_object):  # noqa: ANN001 (test_object can be a class or a class method)
        """Handles @scenarios.scenario_name"""

        pytest.mark.scenario(self.name)(test_object)

        return test_object

    def pytest_configure(self, config: pytest.Config):
        self.is_main_worker = not hasattr(config, "workerinput")

        # only the main worker may recreate the folder, sub workers would remove each other's logs
        if self.is_main_worker:
            shutil.rmtree(self.host_log_folder, ignore_errors=True)
            Path(self.host_log_folder).mkdir(parents=True, exist_ok=True)

        logger.log_to_file(os.path.join(self.host_log_folder, "tests.log"))

    def pytest_sessionstart(self, session: pytest.Session, sample: str):  # noqa: ARG002
        """Called at the very beginning of the process"""

        logger.terminal.write_sep("=", "test context", bold=True)
        logger.stdout(f"Scenario: {self.name}")
        logger.stdout(f"Logs folder: ./{self.host_log_folder}")

        if self.requires_sample:
            logger.stdout(f"Sample: {sample}")
            if sample == DEFAULT_SAMPLE:
                logger.warning(f"No sample name given, Jaeger will be queried for service '{DEFAULT_SAMPLE}'")

    @property
    def host_log_folder(self) -> str:
        return "logs" if self.name == "DEFAULT" else f"logs_{self.name.lower()}"

    def __str__(self) -> str:
        return f"Scenario '{self.name}'"


class _Scenarios:
    default = Scenario("DEFAULT", doc="Offline tests of the harness itself, no sample app nor Jaeger needed")
    trace_e2e = Scenario(
        "TRACE_E2E",
        doc="Query Jaeger for the trace emitted by a running sample app exposing /helloworld",
        requires_sample=True,
    )

    def get(self, name: str) -> Scenario | None:
        for scenario in self.__class__.__dict__.values():
            if isinstance(scenario, Scenario) and scenario.name == name.upper():
                return scenario

        return None


scenarios = _Scenarios()
