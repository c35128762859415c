# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024-2025 Oxford Quantum Circuits Ltd

from typing import Type

from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from qops.utils.logger import get_default_logger

log = get_default_logger()


class QopsConfig(BaseSettings):
    """
    Settings used while decoding operations. Allows environment variables to be
    overridden by direct assignment.

    >>> import os
    >>> os.environ["QOPS_SNAPSHOT_DEFAULT_TYPE"] = "statevector"
    >>> QopsConfig() # doctest: +ELLIPSIS
    QopsConfig(SNAPSHOT_DEFAULT_TYPE='statevector', ...)
    >>> del os.environ["QOPS_SNAPSHOT_DEFAULT_TYPE"]
    >>> QopsConfig(MAX_QUBIT_INDEX=-1) # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
    ...
    pydantic_core._pydantic_core.ValidationError
    """

    model_config = SettingsConfigDict(
        env_prefix="QOPS_",
        validate_assignment=True,
        yaml_file="qopsconfig.yaml",
    )

    SNAPSHOT_DEFAULT_TYPE: str = Field(min_length=1, default="default")
    """Snapshot type appended to snapshots that only carry a label."""

    MAX_QUBIT_INDEX: int | None = Field(ge=0, default=None)
    """Largest qubit index an operation may target, None leaves it unbounded."""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(settings_cls),
        )

    @field_validator("MAX_QUBIT_INDEX")
    def check_max_qubit_index(cls, MAX_QUBIT_INDEX):
        if MAX_QUBIT_INDEX is not None:
            log.info(f"Operations are restricted to qubit indices <= {MAX_QUBIT_INDEX}.")
        return MAX_QUBIT_INDEX
