import pytest

from camctl.core.values import (
    ControlValue,
    LengthMismatchError,
    Rectangle,
    Size,
    TypeMismatchError,
    ValueKind,
    encloses,
    is_enclosed_by,
    is_greater,
    is_less,
)


def _arr(*values: int) -> ControlValue:
    return ControlValue.array(ValueKind.INT32, values)


def _i32(v: int) -> ControlValue:
    return ControlValue.scalar(ValueKind.INT32, v)


def _rect(x: int, y: int, w: int, h: int) -> ControlValue:
    return ControlValue.scalar(ValueKind.RECTANGLE, Rectangle(x, y, w, h))


def test_scalar_natural_order():
    assert is_less(_i32(1), _i32(2))
    assert not is_less(_i32(2), _i32(2))
    assert is_greater(_i32(3), _i32(2))
    assert not is_greater(_i32(2), _i32(3))


def test_array_comparison_is_existential():
    assert is_less(_arr(1, 5), _arr(3, 2)) is True
    assert is_less(_arr(5, 6), _arr(1, 2)) is False
    # 同じ組が「より小さい」と「より大きい」の両方を満たし得る。
    assert is_greater(_arr(1, 5), _arr(3, 2)) is True


def test_array_against_scalar_broadcasts_rhs():
    assert is_less(_arr(10, 0, 10), _i32(1))
    assert not is_less(_arr(10, 5, 10), _i32(1))
    assert is_greater(_arr(0, 0, 7), _i32(6))


def test_array_against_length_one_array_broadcasts():
    assert is_greater(_arr(0, 9), _arr(5))


def test_float_and_string_order():
    lo = ControlValue.scalar(ValueKind.FLOAT, 0.5)
    hi = ControlValue.scalar(ValueKind.FLOAT, 1.5)
    assert is_less(lo, hi) and is_greater(hi, lo)

    a = ControlValue.scalar(ValueKind.STRING, "apple")
    b = ControlValue.scalar(ValueKind.STRING, "banana")
    assert is_less(a, b) and not is_less(b, a)


def test_bool_order_false_before_true():
    f = ControlValue.scalar(ValueKind.BOOL, False)
    t = ControlValue.scalar(ValueKind.BOOL, True)
    assert is_less(f, t)
    assert is_greater(t, f)
    assert not is_less(t, t)


def test_kind_mismatch_is_an_error():
    with pytest.raises(TypeMismatchError):
        is_less(_i32(1), ControlValue.scalar(ValueKind.INT64, 2))
    with pytest.raises(TypeMismatchError):
        is_greater(_i32(1), ControlValue.scalar(ValueKind.FLOAT, 2.0))


def test_length_mismatch_is_an_error():
    with pytest.raises(LengthMismatchError):
        is_less(_arr(1, 2, 3), _arr(1, 2))
    with pytest.raises(LengthMismatchError):
        is_greater(_i32(1), _arr(1, 2))


def test_none_never_compares():
    assert is_less(ControlValue.none(), ControlValue.none()) is False
    assert is_greater(ControlValue.none(), ControlValue.none()) is False


def test_rectangle_uses_containment():
    inner = _rect(1, 1, 2, 2)
    outer = _rect(0, 0, 10, 10)
    assert is_less(inner, outer) is True
    assert is_greater(outer, inner) is True
    assert is_less(outer, inner) is False
    assert is_greater(inner, outer) is False


def test_rectangle_containment_is_strict():
    # 辺を共有する矩形は内包とみなさない。
    assert not is_less(_rect(0, 1, 2, 2), _rect(0, 0, 10, 10))
    assert not is_less(_rect(1, 1, 9, 2), _rect(0, 0, 10, 10))
    # 座標の大小とは無関係（重なっていない矩形は両方 False）。
    assert not is_less(_rect(0, 0, 1, 1), _rect(5, 5, 1, 1))
    assert not is_greater(_rect(0, 0, 1, 1), _rect(5, 5, 1, 1))


def test_named_containment_predicates():
    inner = _rect(1, 1, 2, 2)
    outer = _rect(0, 0, 10, 10)
    assert is_enclosed_by(inner, outer)
    assert encloses(outer, inner)
    assert not encloses(inner, outer)


def test_named_predicates_reject_non_rectangles():
    with pytest.raises(TypeMismatchError):
        is_enclosed_by(_i32(1), _i32(2))


def test_rectangle_array_containment_is_existential():
    windows = ControlValue.array(
        ValueKind.RECTANGLE, [Rectangle(0, 0, 20, 20), Rectangle(2, 2, 2, 2)]
    )
    assert is_enclosed_by(windows, _rect(1, 1, 10, 10))


def test_size_order():
    small = ControlValue.scalar(ValueKind.SIZE, Size(640, 480))
    large = ControlValue.scalar(ValueKind.SIZE, Size(1920, 1080))
    assert is_less(small, large)
    assert is_greater(large, small)
    # 幅だけ大きいが面積が小さい。
    wide = ControlValue.scalar(ValueKind.SIZE, Size(1000, 10))
    tall = ControlValue.scalar(ValueKind.SIZE, Size(100, 1000))
    assert is_less(wide, tall)
    assert not is_less(tall, wide)
    # 面積が等しければ幅で決める。
    a = ControlValue.scalar(ValueKind.SIZE, Size(20, 50))
    b = ControlValue.scalar(ValueKind.SIZE, Size(50, 20))
    assert is_less(a, b)
    assert is_greater(b, a)
