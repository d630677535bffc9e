import math

import pytest
from pydantic import ValidationError

from verify_this.config import ArrayRules, NumberRules, StringRules
from verify_this.types import ErrorKind, RuleViolation, TypeTag, ValidationResult
from verify_this.validator import (
    type_tag_of,
    validate_array,
    validate_email,
    validate_name,
    validate_number,
    validate_string,
)


def test_string_rejects_non_text():
    result = validate_string(1, StringRules())

    assert not result
    assert result.kind is ErrorKind.TYPE_MISMATCH


def test_string_empty_depends_on_can_empty():
    assert validate_string("", StringRules()).kind is ErrorKind.EMPTY_VALUE
    assert validate_string("", StringRules(can_empty=True))


def test_string_length_bounds():
    rules = StringRules(min_chars=5, max_chars=8, alias="Word")

    short = validate_string("Word", rules)
    long = validate_string("Programming", rules)

    assert short.kind is ErrorKind.BELOW_MINIMUM
    assert short.message == "Word has less than 5 characters"
    assert long.kind is ErrorKind.ABOVE_MAXIMUM
    assert long.message == "Word has more than 8 characters"
    assert validate_string("Language", rules)
    assert validate_string("Pytho", rules)


def test_string_type_check_runs_before_empty_check():
    assert validate_string(None, StringRules(can_empty=True)).kind is ErrorKind.TYPE_MISMATCH


def test_single_character_allow_list():
    rules = StringRules(max_chars=1, allowed_chars=["a", "b"])

    rejected = validate_string("x", rules)

    assert rejected.kind is ErrorKind.NOT_ALLOWED
    assert rejected.message == "Entered character is not a or b"
    assert validate_string("a", rules)


def test_allow_list_ignored_unless_max_chars_is_one():
    rules = StringRules(max_chars=2, allowed_chars=["a", "b"])

    assert validate_string("xy", rules)


def test_max_chars_zero_is_enforced():
    assert validate_string("a", StringRules(max_chars=0)).kind is ErrorKind.ABOVE_MAXIMUM


def test_number_type_check_excludes_bool():
    assert validate_number("5", NumberRules()).kind is ErrorKind.TYPE_MISMATCH
    assert validate_number(True, NumberRules()).kind is ErrorKind.TYPE_MISMATCH
    assert validate_number(2.5, NumberRules())


def test_number_zero_minimum_is_enforced():
    assert validate_number(5, NumberRules(min=0))
    assert validate_number(0, NumberRules(min=0))

    result = validate_number(-1, NumberRules(min=0, alias="Degree"))
    assert result.kind is ErrorKind.BELOW_MINIMUM
    assert result.message == "Degree is less than 0"


def test_number_maximum():
    result = validate_number(11, NumberRules(max_value=10))

    assert result.kind is ErrorKind.ABOVE_MAXIMUM
    assert validate_number(10, NumberRules(max_value=10))


def test_number_allow_list_precedes_range_checks():
    rules = NumberRules(allowed_nums=[2, 10], allowed_nums_alias="base", min=5)

    result = validate_number(3, rules)

    assert result.kind is ErrorKind.NOT_ALLOWED
    assert result.message == "Entered base is not allowed"
    assert validate_number(10, rules)
    assert validate_number(2, rules).kind is ErrorKind.BELOW_MINIMUM


def test_array_type_and_empty():
    assert validate_array("abc", ArrayRules()).kind is ErrorKind.TYPE_MISMATCH
    assert validate_array({"a": 1}, ArrayRules()).kind is ErrorKind.TYPE_MISMATCH
    assert validate_array([], ArrayRules()).kind is ErrorKind.EMPTY_VALUE
    assert validate_array((), ArrayRules(can_empty=True))


def test_array_element_kinds_report_first_index():
    rules = ArrayRules(array_of=["number"])

    assert validate_array([1, 2], rules)

    result = validate_array([1, "x", "y"], rules)
    assert result.kind is ErrorKind.TYPE_MISMATCH
    assert result.index == 1
    assert result.message == "Element in index 1 is not a number"


def test_array_element_kinds_accept_several_tags():
    rules = ArrayRules(array_of=[TypeTag.STRING, TypeTag.NUMBER])

    assert validate_array(["a", 1, 2.5], rules)
    result = validate_array(["a", True], rules)
    assert result.index == 1
    assert result.message == "Element in index 1 is not a string or number"


def test_array_length_bounds_after_element_check():
    rules = ArrayRules(min_elements=2, max_elements=3, array_of=["number"])

    assert validate_array([1], rules).kind is ErrorKind.BELOW_MINIMUM
    assert validate_array([1, 2, 3, 4], rules).kind is ErrorKind.ABOVE_MAXIMUM
    assert validate_array(["a"], rules).kind is ErrorKind.TYPE_MISMATCH


def test_type_tags():
    assert type_tag_of("a") is TypeTag.STRING
    assert type_tag_of(3) is TypeTag.NUMBER
    assert type_tag_of(False) is TypeTag.BOOLEAN
    assert type_tag_of([1]) is TypeTag.ARRAY
    assert type_tag_of({"k": 1}) is TypeTag.OBJECT
    assert type_tag_of(None) is TypeTag.NULL
    assert type_tag_of(object()) is TypeTag.OTHER


def test_name_format():
    assert validate_name("Ana María")
    assert validate_name("Héctor")
    assert validate_name("ana").kind is ErrorKind.WRONG_FORMAT
    assert validate_name("").kind is ErrorKind.EMPTY_VALUE


def test_email_format():
    assert validate_email("someuser1@mail.com")
    assert validate_email("short@mail.com").kind is ErrorKind.WRONG_FORMAT
    assert validate_email(42).kind is ErrorKind.TYPE_MISMATCH


def test_raise_for_failure_carries_kind():
    with pytest.raises(RuleViolation) as excinfo:
        validate_array([1, "x"], ArrayRules(array_of=["number"])).raise_for_failure()

    assert excinfo.value.kind is ErrorKind.TYPE_MISMATCH
    assert excinfo.value.index == 1
    validate_number(1, NumberRules()).raise_for_failure()


def test_number_rejects_nan():
    result = validate_number(math.nan, NumberRules(min=0, max_value=100))

    assert result.kind is ErrorKind.TYPE_MISMATCH
    assert validate_number(math.inf, NumberRules(min=0))


def test_failed_result_requires_kind_and_message():
    with pytest.raises(ValidationError):
        ValidationResult(ok=False)
    with pytest.raises(ValidationError):
        ValidationResult(ok=True, kind=ErrorKind.EMPTY_VALUE, message="String is empty")

    failure = ValidationResult.failure(ErrorKind.EMPTY_VALUE, "String is empty")
    assert repr(RuleViolation(failure.kind, failure.message)) == "RuleViolation(EmptyValue: 'String is empty')"
