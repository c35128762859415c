# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Oxford Quantum Circuits Ltd


class InvalidInstruction(ValueError):
    """Raised when a structured value cannot be decoded into a valid :class:`Op`.

    :param message: Human-readable description of the violation.
    :param kind: The operation kind that was being decoded, if known.
    :param field: The offending field, if the violation concerns a single field.
    """

    def __init__(self, message: str, kind: str | None = None, field: str | None = None):
        super().__init__(message)
        self.kind = kind
        self.field = field

    @classmethod
    def for_field(cls, kind: str, field: str, problem: str):
        return cls(f'Invalid {kind} operation: "{field}" {problem}.', kind=kind, field=field)
