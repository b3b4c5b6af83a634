# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Response models for the RANDOM.ORG JSON-RPC API.

Uses Pydantic to validate the ``result`` (or ``error``) objects returned by
the API. Field names are snake_case; aliases match the wire format.
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class _ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class RandomData(_ApiModel, Generic[T]):
    """The ``random`` object: generated values and completion timestamp."""

    data: list[T]
    completion_time: str = Field(alias="completionTime")


class GenerationResult(_ApiModel, Generic[T]):
    """
    Result of a basic generation method.

    Besides the generated values, every result carries the quota metadata
    the dispatcher forwards to tool callers.
    """

    random: RandomData[T]
    bits_used: int = Field(alias="bitsUsed")
    bits_left: int = Field(alias="bitsLeft")
    requests_left: int = Field(alias="requestsLeft")
    advisory_delay: int = Field(alias="advisoryDelay")

    def to_payload(self) -> dict[str, Any]:
        """Flatten into the payload returned to tool callers."""
        return {
            "data": self.random.data,
            "completionTime": self.random.completion_time,
            "bitsUsed": self.bits_used,
            "bitsLeft": self.bits_left,
            "requestsLeft": self.requests_left,
            "advisoryDelay": self.advisory_delay,
        }


# Non-decimal bases come back as strings
IntegerResult = GenerationResult[int | str]
IntegerSequenceResult = GenerationResult[list[int | str]]
DecimalFractionResult = GenerationResult[float]
GaussianResult = GenerationResult[float]
StringResult = GenerationResult[str]
UUIDResult = GenerationResult[str]
BlobResult = GenerationResult[str]


class UsageResult(_ApiModel):
    """Result of ``getUsage``."""

    status: str
    creation_time: str = Field(alias="creationTime")
    bits_left: int = Field(alias="bitsLeft")
    requests_left: int = Field(alias="requestsLeft")
    total_bits: int = Field(alias="totalBits")
    total_requests: int = Field(alias="totalRequests")

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class JsonRpcErrorDetail(_ApiModel):
    """The ``error`` member of a failed JSON-RPC response."""

    code: int
    message: str
    data: Any = None


__all__ = [
    "BlobResult",
    "DecimalFractionResult",
    "GaussianResult",
    "GenerationResult",
    "IntegerResult",
    "IntegerSequenceResult",
    "JsonRpcErrorDetail",
    "RandomData",
    "StringResult",
    "UUIDResult",
    "UsageResult",
]
