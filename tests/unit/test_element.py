"""
Тесты для Element (операторный синтаксис)
"""

import numpy as np
import pytest

from src.vectorspace import (
    DOUBLE,
    FLOAT,
    INTEGER,
    CapabilityError,
    Element,
    ZeroVectorNormalization,
)


class TestModuleOperators:
    """+, -, унарный -, умножение на скаляр"""

    def test_add_sub_neg(self) -> None:
        a, b = Element(DOUBLE, 3.0), Element(DOUBLE, 4.0)
        assert (a + b).value == 7.0
        assert (a - b).value == -1.0
        assert (-a).value == -3.0

    def test_scalar_on_either_side(self) -> None:
        """a * e → scale, e * a → rscale"""
        e = Element(INTEGER, 5)
        assert (3 * e).value == 15
        assert (e * 3).value == 15

    def test_numpy_scalar_on_the_left(self) -> None:
        """numpy-скаляр слева не поглощает Element"""
        e = Element(FLOAT, np.float32(2.0))
        result = np.float32(3.0) * e
        assert isinstance(result, Element)
        assert result.value == np.float32(6.0)

    def test_zero(self) -> None:
        assert Element.zero(INTEGER) == Element(INTEGER, 0)

    def test_elements_do_not_multiply(self) -> None:
        """Произведение двух векторов не определено"""
        with pytest.raises(TypeError):
            Element(DOUBLE, 2.0) * Element(DOUBLE, 3.0)

    def test_mixing_spaces_rejected(self) -> None:
        """Элементы разных пространств не комбинируются"""
        with pytest.raises(CapabilityError, match="cannot combine"):
            Element(DOUBLE, 1.0) + Element(INTEGER, 1)

    def test_adding_raw_scalar_rejected(self) -> None:
        with pytest.raises(TypeError):
            Element(DOUBLE, 1.0) + 1.0


class TestFieldOperators:
    """/, @, abs, normalize"""

    def test_division(self) -> None:
        assert (Element(DOUBLE, 6.0) / 2.0).value == 3.0

    def test_integer_division_unsupported(self) -> None:
        """У целочисленного модуля нет деления"""
        with pytest.raises(TypeError):
            Element(INTEGER, 6) / 2

    def test_dot(self) -> None:
        assert Element(DOUBLE, 3.0) @ Element(DOUBLE, 4.0) == 12.0

    def test_integer_dot_unsupported(self) -> None:
        with pytest.raises(TypeError):
            Element(INTEGER, 3) @ Element(INTEGER, 4)

    def test_norm(self) -> None:
        assert abs(Element(DOUBLE, -5.0)) == 5.0
        assert Element(DOUBLE, 5.0).norm() == 5.0

    def test_integer_norm_unsupported(self) -> None:
        with pytest.raises(CapabilityError, match="has no norm"):
            abs(Element(INTEGER, -5))

    def test_normalize(self) -> None:
        assert Element(DOUBLE, 4.0).normalize() == Element(DOUBLE, 1.0)

    def test_normalize_zero(self) -> None:
        with pytest.raises(ZeroVectorNormalization):
            Element.zero(DOUBLE).normalize()

    def test_plane_expression(self, plane) -> None:
        """Выражение над R²: 2 * (u + v) / 4"""
        u, v = Element(plane, (1.0, 2.0)), Element(plane, (3.0, 0.0))
        assert (2.0 * (u + v) / 4.0).value == (2.0, 1.0)
        assert u @ v == 3.0
