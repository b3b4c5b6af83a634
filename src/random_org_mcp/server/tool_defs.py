# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""MCP tool definitions for the RANDOM.ORG server.

This module contains the tool catalog returned by ``tools/list``. Each
definition declares the JSON schema of its input parameters; bounds mirror
the checks in ``random_org_mcp.validation``.
"""

from ..validation import (
    ALLOWED_BASES,
    ALLOWED_BLOB_FORMATS,
    INTEGER_LIMIT,
    MAX_BLOB_COUNT,
    MAX_BLOB_SIZE,
    MAX_COUNT,
    MAX_DECIMAL_PLACES,
    MAX_SEQUENCE_LENGTH,
    MAX_SIGNIFICANT_DIGITS,
    MAX_STRING_LENGTH,
    MAX_UUID_COUNT,
    MIN_SIGNIFICANT_DIGITS,
)


def _count(what: str, maximum: int) -> dict:
    return {
        "type": "integer",
        "description": f"Number of {what} to generate (1-{maximum:,})",
        "minimum": 1,
        "maximum": maximum,
    }


def _bound(description: str) -> dict:
    return {
        "type": "integer",
        "description": description,
        "minimum": -INTEGER_LIMIT,
        "maximum": INTEGER_LIMIT,
    }


def _replacement(description: str) -> dict:
    return {"type": "boolean", "description": description, "default": True}


_BASE = {
    "type": "integer",
    "description": "Number base (2, 8, 10, or 16)",
    "enum": list(ALLOWED_BASES),
    "default": 10,
}


TOOL_DEFINITIONS: list[dict] = [
    {
        "name": "generateIntegers",
        "description": "Generate true random integers within a specified range",
        "inputSchema": {
            "type": "object",
            "properties": {
                "n": _count("integers", MAX_COUNT),
                "min": _bound("Minimum value (inclusive)"),
                "max": _bound("Maximum value (inclusive)"),
                "replacement": _replacement("Allow replacement (duplicates)"),
                "base": _BASE,
            },
            "required": ["n", "min", "max"],
        },
    },
    {
        "name": "generateIntegerSequences",
        "description": "Generate sequences of true random integers",
        "inputSchema": {
            "type": "object",
            "properties": {
                "n": _count("sequences", MAX_COUNT),
                "length": {
                    "type": "integer",
                    "description": f"Length of each sequence (1-{MAX_SEQUENCE_LENGTH:,})",
                    "minimum": 1,
                    "maximum": MAX_SEQUENCE_LENGTH,
                },
                "min": _bound("Minimum value (inclusive)"),
                "max": _bound("Maximum value (inclusive)"),
                "replacement": _replacement("Allow replacement within each sequence"),
                "base": _BASE,
            },
            "required": ["n", "length", "min", "max"],
        },
    },
    {
        "name": "generateDecimalFractions",
        "description": "Generate true random decimal fractions between 0 and 1",
        "inputSchema": {
            "type": "object",
            "properties": {
                "n": _count("decimal fractions", MAX_COUNT),
                "decimalPlaces": {
                    "type": "integer",
                    "description": f"Number of decimal places (1-{MAX_DECIMAL_PLACES})",
                    "minimum": 1,
                    "maximum": MAX_DECIMAL_PLACES,
                },
                "replacement": _replacement("Allow replacement (duplicates)"),
            },
            "required": ["n", "decimalPlaces"],
        },
    },
    {
        "name": "generateGaussians",
        "description": "Generate true random numbers from a Gaussian distribution",
        "inputSchema": {
            "type": "object",
            "properties": {
                "n": _count("Gaussian numbers", MAX_COUNT),
                "mean": {"type": "number", "description": "Mean of the distribution"},
                "standardDeviation": {
                    "type": "number",
                    "description": "Standard deviation of the distribution",
                    "minimum": 0,
                },
                "significantDigits": {
                    "type": "integer",
                    "description": (
                        f"Number of significant digits "
                        f"({MIN_SIGNIFICANT_DIGITS}-{MAX_SIGNIFICANT_DIGITS})"
                    ),
                    "minimum": MIN_SIGNIFICANT_DIGITS,
                    "maximum": MAX_SIGNIFICANT_DIGITS,
                },
            },
            "required": ["n", "mean", "standardDeviation", "significantDigits"],
        },
    },
    {
        "name": "generateStrings",
        "description": "Generate true random strings",
        "inputSchema": {
            "type": "object",
            "properties": {
                "n": _count("strings", MAX_COUNT),
                "length": {
                    "type": "integer",
                    "description": f"Length of each string (1-{MAX_STRING_LENGTH})",
                    "minimum": 1,
                    "maximum": MAX_STRING_LENGTH,
                },
                "characters": {
                    "type": "string",
                    "description": "Characters to use for generation",
                    "minLength": 1,
                },
                "replacement": _replacement("Allow replacement within each string"),
            },
            "required": ["n", "length", "characters"],
        },
    },
    {
        "name": "generateUUIDs",
        "description": "Generate true random UUIDs (version 4)",
        "inputSchema": {
            "type": "object",
            "properties": {"n": _count("UUIDs", MAX_UUID_COUNT)},
            "required": ["n"],
        },
    },
    {
        "name": "generateBlobs",
        "description": "Generate true random binary data",
        "inputSchema": {
            "type": "object",
            "properties": {
                "n": _count("blobs", MAX_BLOB_COUNT),
                "size": {
                    "type": "integer",
                    "description": f"Size of each blob in bytes (1-{MAX_BLOB_SIZE:,})",
                    "minimum": 1,
                    "maximum": MAX_BLOB_SIZE,
                },
                "format": {
                    "type": "string",
                    "description": "Output format",
                    "enum": list(ALLOWED_BLOB_FORMATS),
                    "default": "base64",
                },
            },
            "required": ["n", "size"],
        },
    },
    {
        "name": "getUsage",
        "description": "Get API usage statistics",
        "inputSchema": {"type": "object", "properties": {}},
    },
]


__all__ = ["TOOL_DEFINITIONS"]
