"""Test the chainable number-as-string schema and its pydantic integration."""
from typing import Annotated

import pytest
from pydantic import BaseModel, ConfigDict, ValidationError
from structlog.testing import capture_logs

from fieldrules import Accepted, Ref, Rejected, number_as_string
from fieldrules.config import get_settings
from fieldrules.errors import ErrorCode
from tests.factories import assert_error_type, make_adapter


class Payment(BaseModel):
    amount: Annotated[str, number_as_string().decimal(",", 2).min(0)]


class StrictPayment(BaseModel):
    model_config = ConfigDict(strict=True)

    amount: Annotated[str, number_as_string()]


class Band(BaseModel):
    low: float
    high: Annotated[str, number_as_string().decimal_separator(".").max_decimals(2).greater(Ref("low"))]


class TestBuilder:
    def test_default_config(self):
        config = number_as_string().config
        assert config.decimal_separator is None
        assert (config.min_decimals, config.max_decimals) == (0, 0)

    def test_calls_return_new_schemas(self):
        base = number_as_string()
        comma = base.decimal_separator(",")
        assert base.config.decimal_separator is None
        assert comma.config.decimal_separator == ","

        ranged = comma.min(1)
        assert comma.rules == ()
        assert len(ranged.rules) == 1

    def test_decimal_is_separator_plus_both_counts(self):
        sugar = number_as_string().decimal(",", 2)
        longhand = number_as_string().decimal_separator(",").min_decimals(2).max_decimals(2)
        assert sugar == longhand

    def test_last_call_wins(self):
        schema = number_as_string().max_decimals(1).max_decimals(3).decimal_separator(".").decimal_separator(",")
        assert schema.config.max_decimals == 3
        assert schema.config.decimal_separator == ","

    def test_order_of_config_calls_is_irrelevant(self):
        a = number_as_string().decimal_separator(".").max_decimals(2)
        b = number_as_string().max_decimals(2).decimal_separator(".")
        assert a == b

    @pytest.mark.parametrize("build", [
        lambda s: s.decimal_separator(";"),
        lambda s: s.decimal(" ", 2),
        lambda s: s.decimal(".", -1),
        lambda s: s.min_decimals(-1),
        lambda s: s.max_decimals(1.5),
        lambda s: s.min("ten"),
        lambda s: s.less(None),
        lambda s: s.min_decimals(True),
        lambda s: s.max_decimals(False),
        lambda s: s.decimal(".", True),
        lambda s: s.min_decimals("2"),
        lambda s: s.min(True),
        lambda s: s.less(False),
        lambda s: s.max("10"),
    ])
    def test_bad_arguments_raise_at_build_time(self, build):
        with pytest.raises(ValidationError):
            build(number_as_string())


class TestCheck:
    def test_not_a_string(self):
        assert number_as_string().check(42) == Rejected(ErrorCode.NOT_A_STRING)
        assert number_as_string().check(None) == Rejected(ErrorCode.NOT_A_STRING)

    def test_convert_trims(self):
        assert number_as_string().check("\t 42\r\n", convert=True) == Accepted("42")

    def test_convert_trims_byte_order_mark(self):
        assert number_as_string().check("\ufeff42", convert=True) == Accepted("42")
        assert number_as_string().check(" 42\ufeff ", convert=True) == Accepted("42")

    def test_byte_order_mark_kept_without_convert(self):
        assert number_as_string().check("\ufeff42", convert=False) == Rejected(ErrorCode.NOT_A_NUMBER)

    def test_without_convert_whitespace_is_not_a_number(self):
        assert number_as_string().check("\t 42\r\n", convert=False) == Rejected(ErrorCode.NOT_A_NUMBER)

    def test_convert_defaults_to_settings(self, monkeypatch):
        assert number_as_string().check(" 42 ") == Accepted("42")

        monkeypatch.setenv("FIELDRULES_CONVERT", "false")
        get_settings.cache_clear()
        assert number_as_string().check(" 42 ") == Rejected(ErrorCode.NOT_A_NUMBER)

    def test_original_string_is_kept(self):
        schema = number_as_string().decimal_separator(",").max_decimals(9).min(10.2)
        assert schema.check("10,20") == Accepted("10,20")
        assert schema.check("10,19999").code == ErrorCode.BELOW_MIN

    def test_max_boundary(self):
        schema = number_as_string().decimal_separator(",").max_decimals(9).max(10.2)
        assert schema.check("10,20") == Accepted("10,20")
        assert schema.check("10,200000001").code == ErrorCode.ABOVE_MAX

    def test_format_checked_before_range(self):
        schema = number_as_string().min(100)
        assert schema.check("5.5").code == ErrorCode.NO_DECIMALS

    def test_first_failing_rule_reported(self):
        schema = number_as_string().min(0).max(5)
        assert schema.check("7").code == ErrorCode.ABOVE_MAX
        assert schema.check("-1").code == ErrorCode.BELOW_MIN
        assert schema.check("3") == Accepted("3")

    def test_greater_and_less(self):
        schema = number_as_string().decimal_separator(".").max_decimals(1).greater(0).less(1)
        assert schema.check("0.5") == Accepted("0.5")
        assert schema.check("0").code == ErrorCode.NOT_GREATER
        assert schema.check("1").code == ErrorCode.NOT_LESS

    def test_referenced_limit(self):
        schema = number_as_string().max(Ref("budget"))
        assert schema.check("80", data={"budget": 100}) == Accepted("80")
        assert schema.check("120", data={"budget": 100}).code == ErrorCode.ABOVE_MAX


class TestPydanticModel:
    def test_valid(self):
        assert Payment(amount="12,50").amount == "12,50"

    def test_wrong_separator(self):
        with pytest.raises(ValidationError) as exc_info:
            Payment(amount="12.50")
        error = assert_error_type(exc_info, "number_as_string.decimal_separator")
        assert error["ctx"]["expected"] == ","
        assert error["msg"] == "needs ',' as decimal separator"

    def test_range_rule(self):
        with pytest.raises(ValidationError) as exc_info:
            Payment(amount="-1,00")
        assert_error_type(exc_info, "number_as_string.min")

    def test_not_a_string(self):
        with pytest.raises(ValidationError) as exc_info:
            Payment(amount=12.5)
        assert_error_type(exc_info, "number_as_string.not_a_string")

    def test_trimmed_by_default(self):
        assert Payment(amount="  1,00 ").amount == "1,00"

    def test_strict_model_does_not_trim(self):
        with pytest.raises(ValidationError) as exc_info:
            StrictPayment(amount=" 42")
        assert_error_type(exc_info, "number_as_string.not_a_number")

    def test_context_overrides_convert(self):
        with pytest.raises(ValidationError) as exc_info:
            Payment.model_validate({"amount": " 1,00"}, context={"convert": False})
        assert_error_type(exc_info, "number_as_string.not_a_number")

    def test_per_call_strict_uses_convert_context(self):
        with pytest.raises(ValidationError) as exc_info:
            Payment.model_validate({"amount": " 1,00"}, strict=True, context={"convert": False})
        assert_error_type(exc_info, "number_as_string.not_a_number")

    def test_sibling_reference(self):
        assert Band(low=1.5, high="1.75").high == "1.75"
        with pytest.raises(ValidationError) as exc_info:
            Band(low=2, high="1.75")
        assert_error_type(exc_info, "number_as_string.greater")

    def test_json_schema(self):
        prop = Payment.model_json_schema()["properties"]["amount"]
        assert prop["type"] == "string"
        assert prop["format"] == "number-as-string"


class TestTypeAdapter:
    def test_validate_python(self):
        adapter = make_adapter(number_as_string().decimal(".", 1))
        assert adapter.validate_python("0.5") == "0.5"

    def test_context_convert(self):
        adapter = make_adapter(number_as_string())
        assert adapter.validate_python(" 7 ") == "7"
        with pytest.raises(ValidationError) as exc_info:
            adapter.validate_python(" 7 ", context={"convert": False})
        assert_error_type(exc_info, "number_as_string.not_a_number")

    def test_validate_json(self):
        adapter = make_adapter(number_as_string())
        assert adapter.validate_json('"-3"') == "-3"


class TestRejectionLogging:
    def test_logged_when_enabled(self, monkeypatch, structlog_defaults):
        monkeypatch.setenv("FIELDRULES_LOG_REJECTIONS", "true")
        get_settings.cache_clear()
        with capture_logs() as logs:
            number_as_string().check("-0")
        assert logs == [{"event": "number_as_string_rejected", "code": "number_as_string.negative_zero", "log_level": "debug"}]

    def test_silent_by_default(self, structlog_defaults):
        with capture_logs() as logs:
            number_as_string().check("-0")
            number_as_string().check("1")
        assert logs == []
