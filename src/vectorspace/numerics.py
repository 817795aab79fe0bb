"""
Numerics — скалярные примитивы для ground ring

Модуль содержит всё, что иерархии пространств нужно знать о скалярах:
- Классификация ground ring: кольцо / поле / floating-поле (через numbers ABC)
- Epsilon-сравнения скаляров с учётом типа кольца
- sqrt в типе кольца

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Для целочисленных колец сравнение всегда точное
2. Арифметика скаляров не оборачивается: overflow/NaN/Inf ведут себя как у host-типа
3. Все функции чистые и детерминированные
"""

import math
import numbers
from typing import Any, Final

import numpy as np

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для double-precision скаляров
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для double-precision скаляров
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# float32 имеет ~7 значащих цифр
EPS_FLOAT32_COMPARE_REL: Final[float] = 1e-5
EPS_FLOAT32_COMPARE_ABS: Final[float] = 1e-6


# =============================================================================
# КЛАССИФИКАЦИЯ GROUND RING
# =============================================================================


def is_ring_type(ring: Any) -> bool:
    """
    Может ли тип служить ground ring модуля.

    Кольцо = числовой тип (numbers.Number): сложение, умножение, отрицание
    и конструирование из целого литерала.

    Examples:
        >>> is_ring_type(int)
        True
        >>> is_ring_type(str)
        False
    """
    return isinstance(ring, type) and issubclass(ring, numbers.Number)


def is_field_type(ring: Any) -> bool:
    """
    Является ли кольцо полем (есть обратные для ненулевых элементов).

    Целочисленные типы (numbers.Integral, включая numpy.integer) полями не
    являются: 1 / 2 выводит из кольца.

    Examples:
        >>> is_field_type(float)
        True
        >>> is_field_type(int)
        False
    """
    return is_ring_type(ring) and not issubclass(ring, numbers.Integral)


def is_floating_type(ring: Any) -> bool:
    """
    Является ли поле вещественным floating-типом (поддерживает sqrt).

    Rational (Fraction) исключён: sqrt не замкнут в рациональных числах.

    Examples:
        >>> is_floating_type(float)
        True
        >>> from fractions import Fraction
        >>> is_floating_type(Fraction)
        False
    """
    return (
        is_field_type(ring)
        and issubclass(ring, numbers.Real)
        and not issubclass(ring, numbers.Rational)
    )


# =============================================================================
# EPSILON-СРАВНЕНИЯ
# =============================================================================


def default_tolerance(ring: Any) -> tuple[float, float]:
    """
    Толерантность (rel_tol, abs_tol) по умолчанию для ground ring.

    Returns:
        (0.0, 0.0) для целочисленных колец (точное сравнение),
        float32-толерантность для numpy.float32,
        double-толерантность для остальных.
    """
    if isinstance(ring, type) and issubclass(ring, numbers.Integral):
        return (0.0, 0.0)
    if ring is np.float32:
        return (EPS_FLOAT32_COMPARE_REL, EPS_FLOAT32_COMPARE_ABS)
    return (EPS_FLOAT_COMPARE_REL, EPS_FLOAT_COMPARE_ABS)


def is_close(
    a: Any,
    b: Any,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение скаляров с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Бесконечности одного знака равны, NaN не равен ничему.

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def scalars_equal(
    a: Any,
    b: Any,
    ring: Any,
    rel_tol: float | None = None,
    abs_tol: float | None = None,
) -> bool:
    """
    Равенство скаляров ground ring.

    Для целочисленных колец — точное ==, иначе is_close с толерантностью
    кольца (или переданной явно).

    Examples:
        >>> scalars_equal(12, 12, int)
        True
        >>> scalars_equal(0.1 + 0.2, 0.3, float)
        True
    """
    if isinstance(ring, type) and issubclass(ring, numbers.Integral):
        return a == b

    default_rel, default_abs = default_tolerance(ring)
    return is_close(
        a,
        b,
        rel_tol=default_rel if rel_tol is None else rel_tol,
        abs_tol=default_abs if abs_tol is None else abs_tol,
    )


# =============================================================================
# ТРАНСЦЕНДЕНТНЫЕ ОПЕРАЦИИ
# =============================================================================


def sqrt_scalar(value: Any, ring: type) -> Any:
    """
    Квадратный корень в типе ground ring.

    NaN/Inf пропагируют по правилам IEEE; отрицательный аргумент даёт
    ValueError от math.sqrt (как у host-арифметики Python).

    Examples:
        >>> sqrt_scalar(25.0, float)
        5.0
    """
    return ring(math.sqrt(value))
