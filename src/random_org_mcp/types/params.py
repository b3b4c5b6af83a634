# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Request parameter types for the generation methods.

Each dataclass mirrors the parameter object of one RANDOM.ORG basic API
method. Field names follow Python conventions; ``to_api_params()`` produces
the camelCase dictionary sent on the wire, omitting optional fields that
were left unset so the API applies its own defaults.
"""

from dataclasses import dataclass, fields
from typing import Any, Literal

from typing_extensions import Self

BlobFormat = Literal["base64", "hex"]


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


class ApiParams:
    """Mixin shared by all parameter dataclasses."""

    def to_api_params(self) -> dict[str, Any]:
        """Serialize to the API's camelCase parameter object."""
        return {
            _camel(f.name): getattr(self, f.name)
            for f in fields(self)  # type: ignore[arg-type]
            if getattr(self, f.name) is not None
        }

    @classmethod
    def from_arguments(cls, arguments: dict[str, Any]) -> Self:
        """
        Build parameters from tool arguments using the API's field names.

        Raises:
            TypeError: If a required argument is missing or an unknown one is given.
        """
        by_wire_name = {_camel(f.name): f.name for f in fields(cls)}  # type: ignore[arg-type]
        kwargs: dict[str, Any] = {}
        for key, value in arguments.items():
            if key not in by_wire_name:
                raise TypeError(f"unexpected argument '{key}'")
            kwargs[by_wire_name[key]] = value
        return cls(**kwargs)


@dataclass
class IntegerParams(ApiParams):
    """Parameters for ``generateIntegers``."""

    n: int
    min: int
    max: int
    replacement: bool | None = None
    base: int | None = None


@dataclass
class IntegerSequenceParams(ApiParams):
    """Parameters for ``generateIntegerSequences``."""

    n: int
    length: int
    min: int
    max: int
    replacement: bool | None = None
    base: int | None = None


@dataclass
class DecimalFractionParams(ApiParams):
    """Parameters for ``generateDecimalFractions``."""

    n: int
    decimal_places: int
    replacement: bool | None = None


@dataclass
class GaussianParams(ApiParams):
    """Parameters for ``generateGaussians``."""

    n: int
    mean: float
    standard_deviation: float
    significant_digits: int


@dataclass
class StringParams(ApiParams):
    """Parameters for ``generateStrings``."""

    n: int
    length: int
    characters: str
    replacement: bool | None = None


@dataclass
class UUIDParams(ApiParams):
    """Parameters for ``generateUUIDs``."""

    n: int


@dataclass
class BlobParams(ApiParams):
    """Parameters for ``generateBlobs``."""

    n: int
    size: int
    format: BlobFormat | None = None


@dataclass
class UsageParams(ApiParams):
    """``getUsage`` takes no parameters beyond the API key."""


__all__ = [
    "ApiParams",
    "BlobFormat",
    "BlobParams",
    "DecimalFractionParams",
    "GaussianParams",
    "IntegerParams",
    "IntegerSequenceParams",
    "StringParams",
    "UUIDParams",
    "UsageParams",
]
