# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024-2025 Oxford Quantum Circuits Ltd

import pytest

from qops.core.config.configure import override_config
from qops.core.config.settings import QopsConfig


@pytest.fixture
def qopsconfig(monkeypatch):
    """A fresh config, independent of the environment, active for the duration of a test."""
    for var in ("QOPS_SNAPSHOT_DEFAULT_TYPE", "QOPS_MAX_QUBIT_INDEX"):
        monkeypatch.delenv(var, raising=False)
    config = QopsConfig()
    with override_config(config):
        yield config
