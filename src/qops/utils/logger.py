# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2023 Oxford Quantum Circuits Ltd
import json
import logging
import os
import sys
from logging.config import dictConfig
from typing import IO, List, Union

_settings_file = "logger_settings.json"

# Formatted to "[INFO] 2020-08-25 19:54:28,216 (module_name.function_name:line_number) - message"
default_logger_format = "[%(levelname)s] %(asctime)s - %(name)s - (%(module)s.%(funcName)s:%(lineno)d) - %(message)s"


class ConsoleLoggerHandler(logging.StreamHandler):
    """
    Basic console handler for the logger. It defaults to stdout.
    """

    def __init__(self, stream: IO = sys.stdout):
        super().__init__(stream)
        self.setFormatter(logging.Formatter(default_logger_format))

    def __repr__(self):
        return "Console logger handler"


class CompositeLogger(logging.Logger):
    """
    The logger used throughout qops. Every call is forwarded to each of the configured
    loggers and to the root logger, so applications embedding qops see its records
    through their own handlers.
    """

    def __init__(self, loggers_or_names: List[Union[str, logging.Logger]] = ()):
        super().__init__("qops.composite")

        self.loggers = [
            logging.getLogger(val) if isinstance(val, str) else val for val in loggers_or_names
        ]
        root = logging.getLogger()
        self.loggers.append(root)

        # The root must not filter out anything one of our loggers lets through.
        root.setLevel(min(val.level for val in self.loggers))

    def _add_stack_levels(self, kwargs):
        """
        Due to the way the loggers work, we need to go back up the stack a few calls to
        get the real caller.
        """
        kwargs["stacklevel"] = kwargs.get("stacklevel", 0) + 2
        return kwargs

    def info(self, msg: str, *args, **kwargs):
        kwargs = self._add_stack_levels(kwargs)
        for logger in self.loggers:
            logger.info(msg, *args, **kwargs)

    def debug(self, msg: str, *args, **kwargs):
        kwargs = self._add_stack_levels(kwargs)
        for logger in self.loggers:
            logger.debug(msg, *args, **kwargs)


def import_logger_configuration(logger_config: dict) -> CompositeLogger:
    """
    Applies a :mod:`logging.config` dictionary and returns a :class:`CompositeLogger` over
    the loggers it declares.

    Loggers may carry an extra `active` flag. Those with `active` set to 0 are left out of
    the configuration entirely.
    """
    loggers = {
        name: {key: val for key, val in settings.items() if key != "active"}
        for name, settings in logger_config["loggers"].items()
        if settings.get("active", 1) != 0
    }
    dictConfig({**logger_config, "loggers": loggers})
    return CompositeLogger(list(loggers))


def get_logger_config(config_file: str | None = None) -> CompositeLogger:
    """
    Loads the logger configuration from a JSON file and applies it.

    The file is looked up as given, then in the working directory, then next to this
    module. When it cannot be found the packaged `logger_settings.json` is used.
    """
    config_file = config_file or _settings_file
    candidates = (
        config_file,
        os.path.join(os.getcwd(), config_file),
        os.path.join(os.path.dirname(__file__), config_file),
    )
    path = next(
        (path for path in candidates if os.path.isfile(path)),
        os.path.join(os.path.dirname(__file__), _settings_file),
    )
    with open(path, "r") as f:
        return import_logger_configuration(json.load(f))


_default_logging_instance = None


def get_default_logger() -> CompositeLogger:
    """Configures the package logger on first use and returns it."""
    global _default_logging_instance
    if _default_logging_instance is None:
        _default_logging_instance = get_logger_config()
    return _default_logging_instance
