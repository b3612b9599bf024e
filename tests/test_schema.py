import datetime
import math

import pytest

from pipecheck import (
    ConfigurationError,
    ConversionError,
    InvalidNumberError,
    KindMismatchError,
    PipeBindingError,
    RequiredError,
    ValidationError,
    create_schema,
)
from pipecheck.model import Validator


def _email(value, message=None):
    if "@" not in value:
        raise ValidationError(message or "Invalid email")


def _to_date(value):
    if isinstance(value, datetime.date):
        return value
    if not isinstance(value, str):
        raise ValidationError("Invalid date")
    return datetime.date.fromisoformat(value)


def test_create_schema():
    string = create_schema("string", "")

    assert string.kind == "string"
    assert string.canonical == ""
    assert string.display_name == "Unknown Schema"
    string.display_name = "string"
    assert string.display_name == "string"


def test_custom_kind_requires_converter():
    with pytest.raises(ConfigurationError, match="convert function"):
        create_schema("date", datetime.date.today())

    date = create_schema("date", datetime.date.today(), _to_date)
    assert date.kind == "date"


def test_pipes_are_optional():
    string = create_schema("string", "")
    validate = string([], False)

    assert validate.required is False
    validate("")
    validate(None)
    validate("test")
    assert string().required is True


def test_schema_with_a_pipe():
    string = create_schema("string", "")
    email = string.create(_email)

    assert email.kind == "string"
    assert email.display_name == "Unknown Validator"
    email.display_name = "email"

    email_validator = email()
    assert isinstance(email_validator, Validator)
    assert email_validator.kind == "string"
    assert email_validator.display_name == "email"
    with pytest.raises(ValidationError, match="Invalid email"):
        email_validator("test")
    with pytest.raises(ValidationError, match="Wrong email"):
        email("Wrong email")("test")

    validate = string([email()])
    assert validate.required is True
    assert validate.kind == "string"
    assert validate.display_name == "Unknown Validator"
    validate("a@b.com")


def test_schema_with_multiple_pipes():
    string = create_schema("string", "")
    email = string.create(_email)

    def blocklisted(value, blocked):
        if value in blocked:
            raise ValidationError("Blocklisted email")

    validate = string([email(), string.create(blocklisted)(["test@example.com"])])

    with pytest.raises(ValidationError, match="Invalid email"):
        validate("what")
    with pytest.raises(ValidationError, match="Blocklisted email"):
        validate("test@example.com")
    validate("normal@email.com")


def test_first_failing_pipe_stops_the_rest():
    number = create_schema("number", 0)
    calls = []

    def always_fails(value):
        calls.append("first")
        raise ValidationError("first failed")

    def records(value):
        calls.append("second")

    validate = number([number.create(always_fails)(), number.create(records)()])

    with pytest.raises(ValidationError, match="first failed"):
        validate(1)
    assert calls == ["first"]


def test_required_and_kind_checks():
    string = create_schema("string", "")
    number = create_schema("number", 0)

    with pytest.raises(RequiredError, match="Required"):
        string()("")
    with pytest.raises(RequiredError, match="Required"):
        string()(None)
    with pytest.raises(InvalidNumberError, match="Invalid number"):
        number()(math.nan)
    with pytest.raises(KindMismatchError, match="Expected string but got number"):
        string()(1)
    with pytest.raises(KindMismatchError, match="Expected number but got boolean"):
        number([], False)(True)
    number()(0)


def test_optional_empty_value_skips_pipes():
    string = create_schema("string", "")
    validate = string([string.create(_email)()], required=False)

    validate("")
    with pytest.raises(ValidationError, match="Invalid email"):
        validate("test")


@pytest.mark.parametrize("canonical,good,bad", [
    ("", "text", 1),
    (0, 1.5, "1"),
    (True, False, 0),
    ({}, {"a": 1}, [1]),
    ([], [1], {"a": 1}),
])
def test_builtin_schemas_accept_only_their_kind(canonical, good, bad):
    validate = create_schema("value", canonical)()

    validate(good)
    with pytest.raises(KindMismatchError):
        validate(bad)


def test_pipe_bound_to_other_kind_fails_at_build_time():
    string = create_schema("string", "")
    number = create_schema("number", 0)
    email = string.create(_email)
    email.display_name = "email"

    with pytest.raises(PipeBindingError) as exc:
        number([email()])
    assert exc.value.message == "[Schema: number]:[Validator: email]: Expected type of 'number' but got 'string'"


def test_pipes_must_be_a_sequence():
    string = create_schema("string", "")

    with pytest.raises(KindMismatchError, match="pipes argument"):
        string("not a list")


def test_schema_converts_custom_kinds():
    date = create_schema("date", datetime.date.today(), _to_date)

    def not_2023(value):
        if value.year == 2023:
            raise ValidationError("Not 2023")

    def not_2021(value):
        if value.year == 2021:
            raise ValidationError("Not 2021")

    validate = date([date.create(not_2023)(), date.create(not_2021)()])

    with pytest.raises(ValidationError, match="Not 2023"):
        validate(datetime.date(2023, 5, 1))
    with pytest.raises(ValidationError, match="Not 2021"):
        validate("2021-05-01")
    validate("2024-10-01")
    with pytest.raises(ValidationError, match="Invalid date"):
        validate(20241001)


def test_converter_failures_become_conversion_errors():
    date = create_schema("date", datetime.date.today(), _to_date)

    with pytest.raises(ConversionError, match="Could not convert value") as exc:
        date()("not a date")
    assert isinstance(exc.value.__cause__, ValueError)


def test_converted_value_must_match_canonical_kind():
    number = create_schema("number", 0, lambda raw: raw)

    with pytest.raises(KindMismatchError, match="Expected number but got string"):
        number()("12")

    parsed = create_schema("number", 0, float)
    parsed()("12")


@pytest.mark.parametrize("canonical,empty", [
    ("", ""),
    (0, math.nan),
    (True, None),
    ({}, {}),
    ([], []),
])
def test_optional_schema_accepts_empty_value_of_each_kind(canonical, empty):
    schema = create_schema("value", canonical)

    def never(value):
        raise ValidationError("pipe ran")

    validate = schema([schema.create(never)()], required=False)

    validate(empty)
    validate(None)
    with pytest.raises(RequiredError):
        schema()(empty)


def test_package_exports_factories_not_prebuilt_schemas():
    import pipecheck

    assert {"create_schema", "object_schema", "extend"} <= set(pipecheck.__all__)
    assert not {"string", "number", "boolean", "array"} & set(pipecheck.__all__)
