# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Oxford Quantum Circuits Ltd
from qops.core.config.configure import get_config as get_config
from qops.core.config.configure import override_config as override_config
from qops.core.config.settings import QopsConfig as QopsConfig
from qops.ir.decoders import decode_observable as decode_observable
from qops.ir.decoders import decode_op as decode_op
from qops.ir.exceptions import InvalidInstruction as InvalidInstruction
from qops.ir.operations import Op as Op
from qops.ir.operations import OpKind as OpKind
