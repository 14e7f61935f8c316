# Unless explicitly stated otherwise all files in this repository are licensed under the the Apache License Version 2.0.
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2021 Datadog, Inc.

from collections.abc import Sequence

import pytest

from sample_traces import context, logger
from sample_traces._context import resolve_sample
from sample_traces.const import DEFAULT_SAMPLE, SAMPLE_ENV_VAR
from sample_traces._scenarios import scenarios

pytest_plugins = ["pytester"]

# pytest does not keep a trace of deselected items, so we keep it in a global variable
_deselected_items: list[pytest.Item] = []


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--scenario", "-S", type=str, action="store", default="DEFAULT", help="Unique identifier of scenario"
    )
    parser.addoption(
        "--sample",
        type=str,
        action="store",
        default=None,
        help=(
            "The name of the sample app used to query traces from Jaeger, "
            f"falls back on ${SAMPLE_ENV_VAR}, then {DEFAULT_SAMPLE}"
        ),
    )


def pytest_configure(config: pytest.Config) -> None:
    current_scenario = scenarios.get(config.option.scenario)

    if current_scenario is None:
        pytest.exit(f"Scenario {config.option.scenario} does not exist", 1)

    context.scenario = current_scenario
    config.option.sample = resolve_sample(config.option.sample)
    context.sample = config.option.sample

    if not config.option.collectonly:
        current_scenario.pytest_configure(config)

    logger.info(f"Context: {context.serialize()}")


# Called at the very beginning
def pytest_sessionstart(session: pytest.Session) -> None:
    # get the terminal to allow logging directly in stdout
    logger.terminal = session.config.pluginmanager.get_plugin("terminalreporter")

    if not session.config.option.collectonly:
        context.scenario.pytest_sessionstart(session, context.sample)


def pytest_collection_modifyitems(session: pytest.Session, config: pytest.Config, items: list[pytest.Item]) -> None:  # noqa: ARG001
    """Unselect items that are not included in the current scenario"""

    selected = []
    deselected = []

    for item in items:
        # if the item has explicit scenario markers, we use them
        # otherwise we use markers declared on its parents
        own_markers = [marker for marker in item.own_markers if marker.name == "scenario"]
        scenario_markers = own_markers if len(own_markers) != 0 else list(item.iter_markers("scenario"))
        if len(scenario_markers) == 0:
            declared_scenarios = ["DEFAULT"]
        else:
            declared_scenarios = [marker.args[0] for marker in scenario_markers]

        if context.scenario.name in declared_scenarios:
            logger.info(f"{item.nodeid} is included in {context.scenario}")
            selected.append(item)
        else:
            logger.debug(f"{item.nodeid} is not included in {context.scenario}")
            deselected.append(item)

    items[:] = selected
    config.hook.pytest_deselected(items=deselected)


def pytest_deselected(items: Sequence[pytest.Item]) -> None:
    _deselected_items.extend(items)


def pytest_sessionfinish(session: pytest.Session, exitstatus: int) -> None:  # noqa: ARG001
    logger.info(f"Executing pytest_sessionfinish, {len(_deselected_items)} tests were not part of {context.scenario}")


## Fixtures corners
@pytest.fixture(scope="session", name="sample")
def fixture_sample() -> str:
    return context.sample
