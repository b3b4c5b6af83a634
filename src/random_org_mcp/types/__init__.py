# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Parameter and result types."""

from .params import (
    ApiParams,
    BlobFormat,
    BlobParams,
    DecimalFractionParams,
    GaussianParams,
    IntegerParams,
    IntegerSequenceParams,
    StringParams,
    UUIDParams,
    UsageParams,
)
from .results import (
    BlobResult,
    DecimalFractionResult,
    GaussianResult,
    GenerationResult,
    IntegerResult,
    IntegerSequenceResult,
    JsonRpcErrorDetail,
    RandomData,
    StringResult,
    UUIDResult,
    UsageResult,
)

__all__ = [
    # Parameters
    "ApiParams",
    "BlobFormat",
    "BlobParams",
    # Results
    "BlobResult",
    "DecimalFractionParams",
    "DecimalFractionResult",
    "GaussianParams",
    "GaussianResult",
    "GenerationResult",
    "IntegerParams",
    "IntegerResult",
    "IntegerSequenceParams",
    "IntegerSequenceResult",
    "JsonRpcErrorDetail",
    "RandomData",
    "StringParams",
    "StringResult",
    "UUIDParams",
    "UUIDResult",
    "UsageParams",
    "UsageResult",
]
