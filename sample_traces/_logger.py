# Unless explicitly stated otherwise all files in this repository are licensed under the the Apache License Version 2.0.
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2021 Datadog, Inc.

import json
import logging
from typing import Any

from _pytest.terminal import TerminalReporter


STDOUT = 100
LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)-8s %(message)s"

logging.addLevelName(STDOUT, "STDOUT")
# connection pool chatter would drown every Jaeger poll
logging.getLogger("urllib3").setLevel(logging.WARNING)


class Logger(logging.Logger):
    terminal: TerminalReporter | None = None

    def stdout(self, message: str) -> None:
        """Log message, and show it in the pytest terminal once the session is started"""
        self.log(STDOUT, message)

        if self.terminal is not None:
            self.terminal.write_line(message)

    def json(self, title: str, data: Any) -> None:  # noqa: ANN401
        self.info(f"{title}: \n{json.dumps(data, indent=2)}\n")

    def log_to_file(self, path: str) -> None:
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT, "%H:%M:%S"))
        self.addHandler(handler)


# only our logger gets the extra methods, other loggers keep the default class
logging.setLoggerClass(Logger)
logger: Logger = logging.getLogger("sample_traces")  # type: ignore[assignment]
logging.setLoggerClass(logging.Logger)

logger.setLevel(logging.DEBUG)
