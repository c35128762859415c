# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Oxford Quantum Circuits Ltd
"""Access to the active :class:`QopsConfig`.

Decoders read their settings through :func:`get_config`, which prefers a config
installed with :func:`override_config` in the current context over the process-wide
one built from the environment.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from functools import lru_cache

from qops.core.config.settings import QopsConfig

_override: ContextVar[QopsConfig | None] = ContextVar("qops_config_override", default=None)


@lru_cache(maxsize=1)
def get_global_config() -> QopsConfig:
    return QopsConfig()


def get_config() -> QopsConfig:
    override = _override.get()
    return get_global_config() if override is None else override


@contextmanager
def override_config(config: QopsConfig):
    """Makes `config` the active config for the enclosed block, in this context only."""
    token = _override.set(config)
    try:
        yield config
    finally:
        _override.reset(token)
