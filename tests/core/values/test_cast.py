import math

import numpy as np
import pytest

from camctl.core.values import (
    ControlValue,
    InvalidCastError,
    MalformedValueError,
    Rectangle,
    Size,
    ValueKind,
    cast,
    cast_all,
    cast_to_string,
    format_value,
)

_SAMPLES = [
    ControlValue.scalar(ValueKind.BOOL, True),
    ControlValue.scalar(ValueKind.BYTE, 200),
    ControlValue.scalar(ValueKind.INT32, -5),
    ControlValue.scalar(ValueKind.INT64, 2**40),
    ControlValue.scalar(ValueKind.FLOAT, 1.25),
    ControlValue.scalar(ValueKind.STRING, "auto"),
    ControlValue.scalar(ValueKind.RECTANGLE, Rectangle(0, 0, 10, 10)),
    ControlValue.scalar(ValueKind.SIZE, Size(640, 480)),
    ControlValue.array(ValueKind.INT32, [1, 2, 3]),
    ControlValue.none(),
]


@pytest.mark.parametrize("value", _SAMPLES, ids=lambda v: f"{v.kind.value}-{v.is_array}")
def test_identity_cast_returns_same_object(value):
    assert cast(value, value.kind) is value


@pytest.mark.parametrize(
    "value,target,expected",
    [
        (ControlValue.scalar(ValueKind.INT32, 300), ValueKind.BYTE, 44),
        (ControlValue.scalar(ValueKind.INT32, -1), ValueKind.BYTE, 255),
        (ControlValue.scalar(ValueKind.INT64, 2**31), ValueKind.INT32, -(2**31)),
        (ControlValue.scalar(ValueKind.BYTE, 255), ValueKind.INT32, 255),
        (ControlValue.scalar(ValueKind.FLOAT, 2.9), ValueKind.INT32, 2),
        (ControlValue.scalar(ValueKind.FLOAT, -2.9), ValueKind.INT64, -2),
        (ControlValue.scalar(ValueKind.INT32, 3), ValueKind.FLOAT, 3.0),
        (ControlValue.scalar(ValueKind.BOOL, True), ValueKind.INT32, 1),
        (ControlValue.scalar(ValueKind.BOOL, False), ValueKind.FLOAT, 0.0),
        (ControlValue.scalar(ValueKind.INT32, 0), ValueKind.BOOL, False),
        (ControlValue.scalar(ValueKind.FLOAT, 0.5), ValueKind.BOOL, True),
    ],
)
def test_numeric_to_numeric(value, target, expected):
    out = cast(value, target)
    assert out.kind is target
    assert out.is_array is False
    assert out.payload == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        (ControlValue.scalar(ValueKind.BOOL, True), "1"),
        (ControlValue.scalar(ValueKind.BOOL, False), "0"),
        (ControlValue.scalar(ValueKind.BYTE, 7), "7"),
        (ControlValue.scalar(ValueKind.INT32, -12), "-12"),
        (ControlValue.scalar(ValueKind.INT64, 2**40), "1099511627776"),
        (ControlValue.scalar(ValueKind.FLOAT, 1.5), "1.5"),
        (ControlValue.scalar(ValueKind.FLOAT, 0.1), "0.1"),
        (ControlValue.scalar(ValueKind.FLOAT, 3.0), "3"),
    ],
)
def test_numeric_to_string(value, expected):
    out = cast_to_string(value)
    assert out.kind is ValueKind.STRING
    assert out.payload == expected


@pytest.mark.parametrize(
    "text,target,expected",
    [
        ("true", ValueKind.BOOL, True),
        (" false ", ValueKind.BOOL, False),
        ("255", ValueKind.BYTE, 255),
        ("-2147483648", ValueKind.INT32, -(2**31)),
        ("+42", ValueKind.INT64, 42),
        ("1.5", ValueKind.FLOAT, 1.5),
        ("-2e3", ValueKind.FLOAT, -2000.0),
        (".25", ValueKind.FLOAT, 0.25),
    ],
)
def test_string_to_numeric(text, target, expected):
    out = cast(ControlValue.scalar(ValueKind.STRING, text), target)
    assert out.kind is target
    assert out.payload == expected


def test_string_to_float_accepts_special_words():
    out = cast(ControlValue.scalar(ValueKind.STRING, "inf"), ValueKind.FLOAT)
    assert math.isinf(out.payload)
    out = cast(ControlValue.scalar(ValueKind.STRING, "nan"), ValueKind.FLOAT)
    assert math.isnan(out.payload)


@pytest.mark.parametrize(
    "text,target",
    [
        ("True", ValueKind.BOOL),
        ("1", ValueKind.BOOL),
        ("yes", ValueKind.BOOL),
        ("256", ValueKind.BYTE),
        ("-1", ValueKind.BYTE),
        ("2147483648", ValueKind.INT32),
        ("1.5", ValueKind.INT32),
        ("12abc", ValueKind.INT64),
        ("1_000", ValueKind.INT64),
        ("", ValueKind.INT32),
        ("abc", ValueKind.FLOAT),
        ("1e39", ValueKind.FLOAT),
    ],
)
def test_string_to_numeric_rejects_malformed_text(text, target):
    with pytest.raises(MalformedValueError) as exc_info:
        cast(ControlValue.scalar(ValueKind.STRING, text), target)
    assert exc_info.value.target_kind is target
    assert exc_info.value.text == text


def test_non_finite_float_to_integer_is_malformed():
    value = ControlValue.scalar(ValueKind.FLOAT, float("nan"))
    with pytest.raises(MalformedValueError):
        cast(value, ValueKind.INT32)


@pytest.mark.parametrize(
    "value",
    [
        ControlValue.scalar(ValueKind.BYTE, 0),
        ControlValue.scalar(ValueKind.INT32, -(2**31)),
        ControlValue.scalar(ValueKind.INT64, 2**63 - 1),
        ControlValue.scalar(ValueKind.FLOAT, 0.1),
        ControlValue.scalar(ValueKind.FLOAT, -3.4028234663852886e38),
        ControlValue.scalar(ValueKind.FLOAT, 1.401298464324817e-45),
    ],
)
def test_render_then_parse_round_trips(value):
    text = cast_to_string(value)
    back = cast(text, value.kind)
    assert back == value


def test_array_cast_preserves_length_and_order():
    arr = ControlValue.array(ValueKind.FLOAT, [1.5, -2.5, 3.0])
    out = cast(arr, ValueKind.INT32)
    assert out.is_array
    assert out.num_elements() == arr.num_elements()
    assert out.payload == (1, -2, 3)

    text = cast(arr, ValueKind.STRING)
    assert text.payload == ("1.5", "-2.5", "3")
    assert cast(text, ValueKind.FLOAT) == arr


def test_empty_array_cast_stays_empty_array():
    out = cast(ControlValue.array(ValueKind.INT32, []), ValueKind.FLOAT)
    assert out.is_array and out.num_elements() == 0


def test_array_to_bool_is_invalid():
    for source in (
        ControlValue.array(ValueKind.INT32, [0, 1]),
        ControlValue.array(ValueKind.STRING, ["true"]),
    ):
        with pytest.raises(InvalidCastError):
            cast(source, ValueKind.BOOL)


def test_bool_array_to_other_kind_is_allowed():
    out = cast(ControlValue.array(ValueKind.BOOL, [True, False]), ValueKind.BYTE)
    assert out.payload == (1, 0)


@pytest.mark.parametrize("geometric", [ValueKind.RECTANGLE, ValueKind.SIZE])
@pytest.mark.parametrize(
    "other",
    [
        ValueKind.BOOL,
        ValueKind.BYTE,
        ValueKind.INT32,
        ValueKind.INT64,
        ValueKind.FLOAT,
        ValueKind.STRING,
    ],
)
def test_geometric_kinds_do_not_interoperate(geometric, other):
    source_values = {
        ValueKind.BOOL: ControlValue.scalar(ValueKind.BOOL, True),
        ValueKind.BYTE: ControlValue.scalar(ValueKind.BYTE, 1),
        ValueKind.INT32: ControlValue.scalar(ValueKind.INT32, 1),
        ValueKind.INT64: ControlValue.scalar(ValueKind.INT64, 1),
        ValueKind.FLOAT: ControlValue.scalar(ValueKind.FLOAT, 1.0),
        ValueKind.STRING: ControlValue.scalar(ValueKind.STRING, "1"),
    }
    with pytest.raises(InvalidCastError) as exc_info:
        cast(source_values[other], geometric)
    assert exc_info.value.source_kind is other
    assert exc_info.value.target_kind is geometric

    geo_value = (
        ControlValue.scalar(ValueKind.RECTANGLE, Rectangle(0, 0, 1, 1))
        if geometric is ValueKind.RECTANGLE
        else ControlValue.scalar(ValueKind.SIZE, Size(1, 1))
    )
    with pytest.raises(InvalidCastError):
        cast(geo_value, other)


def test_rectangle_and_size_do_not_interoperate():
    rect = ControlValue.scalar(ValueKind.RECTANGLE, Rectangle(0, 0, 4, 3))
    with pytest.raises(InvalidCastError) as exc_info:
        cast(rect, ValueKind.SIZE)
    assert str(exc_info.value) == "invalid conversion from 'Rectangle' to 'Size'"


def test_none_participates_in_no_conversion():
    assert cast(ControlValue.none(), ValueKind.INT32).is_none()
    assert cast(ControlValue.scalar(ValueKind.INT32, 1), ValueKind.NONE).is_none()
    assert cast(ControlValue.scalar(ValueKind.RECTANGLE, Rectangle()), "none").is_none()


def test_cast_accepts_kind_names():
    out = cast(ControlValue.scalar(ValueKind.STRING, "10"), "int64")
    assert out.kind is ValueKind.INT64 and out.payload == 10


def test_cast_all_converts_every_control():
    values = {
        "ExposureTime": ControlValue.scalar(ValueKind.INT32, 10000),
        "ColourGains": ControlValue.array(ValueKind.FLOAT, [1.5, 2.0]),
        "AeEnable": ControlValue.scalar(ValueKind.BOOL, True),
    }
    out = cast_all(values, ValueKind.STRING)
    assert out == {
        "ExposureTime": ControlValue.scalar(ValueKind.STRING, "10000"),
        "ColourGains": ControlValue.array(ValueKind.STRING, ["1.5", "2"]),
        "AeEnable": ControlValue.scalar(ValueKind.STRING, "1"),
    }


def test_cast_all_propagates_first_failure():
    values = {"ScalerCrop": ControlValue.scalar(ValueKind.RECTANGLE, Rectangle())}
    with pytest.raises(InvalidCastError):
        cast_all(values, ValueKind.STRING)


def test_float_to_byte_truncates_then_wraps():
    out = cast(ControlValue.scalar(ValueKind.FLOAT, 257.7), ValueKind.BYTE)
    assert out.payload == 1
    assert out.payload == int(np.array([257], dtype=np.int64).astype(np.uint8)[0])


def test_bool_to_string_is_decimal_but_display_keeps_words():
    flags = ControlValue.array(ValueKind.BOOL, [True, False])
    assert cast(flags, ValueKind.STRING).payload == ("1", "0")
    assert format_value(flags) == "[ true, false ]"
