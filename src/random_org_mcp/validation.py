# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Parameter validation for the generation methods.

Every check is pure and synchronous. The first violated constraint raises
ParameterValidationError with a message naming the field and its valid
range, so callers get a useful error without a round trip to the API.
"""

from collections.abc import Callable
from typing import Any

from .exceptions import ParameterValidationError
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

MAX_COUNT = 10_000
MAX_UUID_COUNT = 1_000
MAX_BLOB_COUNT = 100
MAX_BLOB_SIZE = 1_048_576
INTEGER_LIMIT = 1_000_000_000
MAX_DECIMAL_PLACES = 20
MIN_SIGNIFICANT_DIGITS = 2
MAX_SIGNIFICANT_DIGITS = 20
MAX_STRING_LENGTH = 20
MAX_SEQUENCE_LENGTH = 10_000

ALLOWED_BASES = (2, 8, 10, 16)
ALLOWED_BLOB_FORMATS = ("base64", "hex")


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_range(
    name: str, value: Any, low: int, high: int, unit: str = ""
) -> None:
    if not _is_integer(value):
        raise ParameterValidationError(f"{name} must be an integer", field=name)
    if value < low or value > high:
        suffix = f" {unit}" if unit else ""
        raise ParameterValidationError(
            f"{name} must be between {low:,} and {high:,}{suffix}", field=name
        )


def _check_min_max(min_value: Any, max_value: Any) -> None:
    _check_range("min", min_value, -INTEGER_LIMIT, INTEGER_LIMIT)
    _check_range("max", max_value, -INTEGER_LIMIT, INTEGER_LIMIT)
    if min_value >= max_value:
        raise ParameterValidationError("min must be less than max", field="min")


def _check_base(base: Any) -> None:
    if base is not None and (not _is_integer(base) or base not in ALLOWED_BASES):
        raise ParameterValidationError("base must be 2, 8, 10, or 16", field="base")


def validate_integer_params(params: IntegerParams) -> None:
    _check_range("n", params.n, 1, MAX_COUNT)
    _check_min_max(params.min, params.max)
    _check_base(params.base)


def validate_integer_sequence_params(params: IntegerSequenceParams) -> None:
    _check_range("n", params.n, 1, MAX_COUNT)
    _check_range("length", params.length, 1, MAX_SEQUENCE_LENGTH)
    _check_min_max(params.min, params.max)
    _check_base(params.base)


def validate_decimal_fraction_params(params: DecimalFractionParams) -> None:
    _check_range("n", params.n, 1, MAX_COUNT)
    _check_range("decimalPlaces", params.decimal_places, 1, MAX_DECIMAL_PLACES)


def validate_gaussian_params(params: GaussianParams) -> None:
    _check_range("n", params.n, 1, MAX_COUNT)
    if not _is_number(params.mean):
        raise ParameterValidationError("mean must be a number", field="mean")
    if not _is_number(params.standard_deviation) or params.standard_deviation < 0:
        raise ParameterValidationError(
            "standardDeviation must be a non-negative number",
            field="standardDeviation",
        )
    _check_range(
        "significantDigits",
        params.significant_digits,
        MIN_SIGNIFICANT_DIGITS,
        MAX_SIGNIFICANT_DIGITS,
    )


def validate_string_params(params: StringParams) -> None:
    _check_range("n", params.n, 1, MAX_COUNT)
    _check_range("length", params.length, 1, MAX_STRING_LENGTH)
    if not isinstance(params.characters, str) or not params.characters:
        raise ParameterValidationError(
            "characters must be a non-empty string", field="characters"
        )


def validate_uuid_params(params: UUIDParams) -> None:
    _check_range("n", params.n, 1, MAX_UUID_COUNT)


def validate_blob_params(params: BlobParams) -> None:
    _check_range("n", params.n, 1, MAX_BLOB_COUNT)
    _check_range("size", params.size, 1, MAX_BLOB_SIZE, unit="bytes")
    if params.format is not None and params.format not in ALLOWED_BLOB_FORMATS:
        raise ParameterValidationError(
            'format must be "base64" or "hex"', field="format"
        )


def validate_usage_params(params: UsageParams) -> None:
    """getUsage has nothing to validate."""


Validator = Callable[[Any], None]


def validate(params: ApiParams) -> None:
    """
    Validate any parameter object by dispatching on its type.

    Args:
        params: One of the parameter dataclasses from ``types.params``.

    Raises:
        ParameterValidationError: On the first violated constraint.
        TypeError: If ``params`` is not a known parameter type.
    """
    validator = VALIDATORS.get(type(params))
    if validator is None:
        raise TypeError(f"No validator registered for {type(params).__name__}")
    validator(params)


VALIDATORS: dict[type[ApiParams], Validator] = {
    IntegerParams: validate_integer_params,
    IntegerSequenceParams: validate_integer_sequence_params,
    DecimalFractionParams: validate_decimal_fraction_params,
    GaussianParams: validate_gaussian_params,
    StringParams: validate_string_params,
    UUIDParams: validate_uuid_params,
    BlobParams: validate_blob_params,
    UsageParams: validate_usage_params,
}


__all__ = [
    "ALLOWED_BASES",
    "ALLOWED_BLOB_FORMATS",
    "VALIDATORS",
    "validate",
    "validate_blob_params",
    "validate_decimal_fraction_params",
    "validate_gaussian_params",
    "validate_integer_params",
    "validate_integer_sequence_params",
    "validate_string_params",
    "validate_usage_params",
    "validate_uuid_params",
]
