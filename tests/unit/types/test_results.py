import pytest
from pydantic import ValidationError

from random_org_mcp.types.results import (
    BlobResult,
    IntegerResult,
    IntegerSequenceResult,
    JsonRpcErrorDetail,
    UsageResult,
)


class TestGenerationResult:
    def test_parses_wire_format(self, integer_result):
        result = IntegerResult.model_validate(integer_result)
        assert result.random.data == [3, 7, 1, 9, 2]
        assert result.random.completion_time == "t"
        assert result.bits_used == 20
        assert result.bits_left == 99980
        assert result.requests_left == 999
        assert result.advisory_delay == 0

    def test_to_payload(self, integer_result):
        payload = IntegerResult.model_validate(integer_result).to_payload()
        assert payload == {
            "data": [3, 7, 1, 9, 2],
            "completionTime": "t",
            "bitsUsed": 20,
            "bitsLeft": 99980,
            "requestsLeft": 999,
            "advisoryDelay": 0,
        }

    def test_non_decimal_base_values_kept_as_strings(self, integer_result):
        integer_result["random"]["data"] = ["1f", "a0"]
        result = IntegerResult.model_validate(integer_result)
        assert result.random.data == ["1f", "a0"]

    def test_sequences(self, integer_result):
        integer_result["random"]["data"] = [[1, 2], [3, 4, 5]]
        result = IntegerSequenceResult.model_validate(integer_result)
        assert result.random.data == [[1, 2], [3, 4, 5]]

    def test_extra_fields_ignored(self, integer_result):
        integer_result["random"]["signature"] = "ignored"
        integer_result["license"] = {}
        IntegerResult.model_validate(integer_result)

    def test_missing_quota_field(self, integer_result):
        del integer_result["bitsLeft"]
        with pytest.raises(ValidationError):
            IntegerResult.model_validate(integer_result)

    def test_blob_data_is_strings(self, integer_result):
        integer_result["random"]["data"] = ["aGVsbG8="]
        assert BlobResult.model_validate(integer_result).random.data == ["aGVsbG8="]


class TestUsageResult:
    def test_parses_and_dumps_by_alias(self, usage_result):
        result = UsageResult.model_validate(usage_result)
        assert result.status == "running"
        assert result.bits_left == 250000
        assert result.to_payload() == usage_result


class TestJsonRpcErrorDetail:
    def test_optional_data(self):
        detail = JsonRpcErrorDetail.model_validate({"code": 400, "message": "bad key"})
        assert detail.data is None
