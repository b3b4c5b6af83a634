# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
The closed set of operations the server exposes.

Each Operation member binds an API method name to its parameter type, its
result model and its validator. The dispatcher and the client both work
from this table, so adding a method means adding exactly one member here.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from . import validation
from .types.params import (
    ApiParams,
    BlobParams,
    DecimalFractionParams,
    GaussianParams,
    IntegerParams,
    IntegerSequenceParams,
    StringParams,
    UUIDParams,
    UsageParams,
)
from .types.results import (
    BlobResult,
    DecimalFractionResult,
    GaussianResult,
    IntegerResult,
    IntegerSequenceResult,
    StringResult,
    UUIDResult,
    UsageResult,
)


@dataclass(frozen=True)
class OperationSpec:
    """Static description of one API method."""

    method: str
    params_type: type[ApiParams]
    result_type: Any


class Operation(Enum):
    """Supported RANDOM.ORG basic API methods."""

    GENERATE_INTEGERS = OperationSpec("generateIntegers", IntegerParams, IntegerResult)
    GENERATE_INTEGER_SEQUENCES = OperationSpec(
        "generateIntegerSequences", IntegerSequenceParams, IntegerSequenceResult
    )
    GENERATE_DECIMAL_FRACTIONS = OperationSpec(
        "generateDecimalFractions", DecimalFractionParams, DecimalFractionResult
    )
    GENERATE_GAUSSIANS = OperationSpec("generateGaussians", GaussianParams, GaussianResult)
    GENERATE_STRINGS = OperationSpec("generateStrings", StringParams, StringResult)
    GENERATE_UUIDS = OperationSpec("generateUUIDs", UUIDParams, UUIDResult)
    GENERATE_BLOBS = OperationSpec("generateBlobs", BlobParams, BlobResult)
    GET_USAGE = OperationSpec("getUsage", UsageParams, UsageResult)

    @property
    def method(self) -> str:
        return self.value.method

    @property
    def params_type(self) -> type[ApiParams]:
        return self.value.params_type

    @property
    def result_type(self) -> Any:
        return self.value.result_type

    def validate(self, params: ApiParams) -> None:
        """
        Run this operation's validator.

        Raises:
            TypeError: If ``params`` belongs to a different operation.
            ParameterValidationError: On the first violated constraint.
        """
        if not isinstance(params, self.params_type):
            raise TypeError(
                f"{self.method} expects {self.params_type.__name__}, "
                f"got {type(params).__name__}"
            )
        validation.validate(params)

    @classmethod
    def from_method(cls, method: str) -> "Operation":
        """
        Look up an operation by its API method name.

        Raises:
            KeyError: If no operation uses that method name.
        """
        for operation in cls:
            if operation.method == method:
                return operation
        raise KeyError(method)


__all__ = ["Operation", "OperationSpec"]
