"""
Тесты для RModule

Проверяет:
1. Минимальное определение: scale ИЛИ rscale, второе выводится
2. Отклонение класса без scale и rscale
3. Требования к ground ring
4. Производные операции negate / sub
"""

from fractions import Fraction

import pytest

from src.vectorspace import CapabilityError, RModule


# =============================================================================
# ТЕСТОВЫЕ МОДУЛИ
# =============================================================================


class PairModuleLeft(RModule[tuple[int, int], int]):
    """Z² с левым действием."""

    ring = int

    def zero(self) -> tuple[int, int]:
        return (0, 0)

    def add(self, v1, v2):
        return (v1[0] + v2[0], v1[1] + v2[1])

    def scale(self, a, v):
        return (a * v[0], a * v[1])


class PairModuleRight(RModule[tuple[int, int], int]):
    """Z² с правым действием."""

    ring = int

    def zero(self) -> tuple[int, int]:
        return (0, 0)

    def add(self, v1, v2):
        return (v1[0] + v2[0], v1[1] + v2[1])

    def rscale(self, v, a):
        return (v[0] * a, v[1] * a)


# =============================================================================
# ТЕСТЫ МИНИМАЛЬНОГО ОПРЕДЕЛЕНИЯ
# =============================================================================


class TestMinimalDefinition:
    """Тесты вывода scale/rscale друг из друга"""

    @pytest.mark.parametrize("space", [PairModuleLeft(), PairModuleRight()])
    def test_both_actions_available(self, space) -> None:
        """Задав одно действие, получаем оба"""
        assert space.scale(3, (1, 2)) == (3, 6)
        assert space.rscale((1, 2), 3) == (3, 6)

    def test_neither_action_rejected(self) -> None:
        """Класс без scale и rscale отклоняется при определении"""
        with pytest.raises(CapabilityError, match="scale or rscale"):

            class NoAction(RModule[int, int]):
                ring = int

                def zero(self) -> int:
                    return 0

                def add(self, v1, v2):
                    return v1 + v2

    def test_abstract_intermediate_allowed(self) -> None:
        """Класс с оставшимися abstract-методами не проверяется на scale"""

        class Partial(RModule[int, int]):
            ring = int

            def zero(self) -> int:
                return 0

        class Complete(Partial):
            def add(self, v1, v2):
                return v1 + v2

            def rscale(self, v, a):
                return v * a

        assert Complete().scale(2, 5) == 10

    def test_abstract_class_not_instantiable(self) -> None:
        """Незавершённый класс нельзя инстанцировать"""

        class Partial(RModule[int, int]):
            ring = int

            def zero(self) -> int:
                return 0

        with pytest.raises(TypeError):
            Partial()


# =============================================================================
# ТЕСТЫ GROUND RING
# =============================================================================


class TestGroundRing:
    """Тесты требований к ground ring"""

    def test_non_numeric_ring_rejected(self) -> None:
        """Нечисловой ring отклоняется"""
        with pytest.raises(CapabilityError, match="numeric type"):

            class StringModule(RModule[str, str]):
                ring = str

                def zero(self) -> str:
                    return ""

                def add(self, v1, v2):
                    return v1 + v2

                def rscale(self, v, a):
                    return v * a

    def test_unbound_ring_cannot_instantiate(self) -> None:
        """Пространство без ground ring нельзя инстанцировать"""

        class Unbound(RModule[int, int]):
            def zero(self) -> int:
                return 0

            def add(self, v1, v2):
                return v1 + v2

            def rscale(self, v, a):
                return v * a

        with pytest.raises(CapabilityError, match="not bound"):
            Unbound()

    def test_rational_ring_is_a_valid_module(self) -> None:
        """Fraction — допустимое кольцо модуля"""

        class RationalModule(RModule[Fraction, Fraction]):
            ring = Fraction

            def zero(self) -> Fraction:
                return Fraction(0)

            def add(self, v1, v2):
                return v1 + v2

            def rscale(self, v, a):
                return v * a

        space = RationalModule()
        assert space.negate(Fraction(1, 3)) == Fraction(-1, 3)

    def test_capability_error_is_type_error(self) -> None:
        """CapabilityError — подкласс TypeError"""
        assert issubclass(CapabilityError, TypeError)

    def test_repr_names_ring(self) -> None:
        """repr содержит имя кольца"""
        assert repr(PairModuleLeft()) == "PairModuleLeft(ring=int)"


# =============================================================================
# ТЕСТЫ ПРОИЗВОДНЫХ ОПЕРАЦИЙ
# =============================================================================


class TestDerivedOperations:
    """Тесты negate / sub по умолчанию"""

    def test_negate_is_scale_by_minus_one(self) -> None:
        """negateVector v == (-1) *^ v"""
        space = PairModuleRight()
        assert space.negate((2, -5)) == (-2, 5)
        assert space.negate((2, -5)) == space.scale(-1, (2, -5))

    def test_sub_is_add_negate(self) -> None:
        """v1 ^-^ v2 == v1 ^+^ negateVector v2"""
        space = PairModuleLeft()
        assert space.sub((5, 7), (2, 10)) == (3, -3)
        assert space.sub((5, 7), (2, 10)) == space.add((5, 7), space.negate((2, 10)))

    def test_sub_self_is_zero(self) -> None:
        """v ^-^ v == zeroVector"""
        space = PairModuleLeft()
        assert space.sub((4, 9), (4, 9)) == space.zero()

    def test_plane_uses_default_scale(self, plane) -> None:
        """PlaneSpace задаёт только rscale"""
        assert plane.scale(2.0, (1.0, -3.0)) == (2.0, -6.0)
        assert plane.negate((1.0, -3.0)) == (-1.0, 3.0)
        assert plane.sub((1.0, 1.0), (0.5, 2.0)) == (0.5, -1.0)
