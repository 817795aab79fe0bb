"""
Primitive — instances для встроенных числовых типов

Каждый скаляр — одномерное пространство над самим собой:
    zero()        = ring(0)
    add(v1, v2)   = v1 + v2
    rscale(v, a)  = v * a     (скаляр и вектор совпадают)

Instances:
- INTEGER  int            (произвольная точность)   RModule
- INT      numpy.int64    (фиксированная ширина)    RModule
- DOUBLE   float                                    NormedSpace
- FLOAT    numpy.float32                            NormedSpace

Целочисленные instances намеренно НЕ являются VectorSpace: у кольца нет
общего обратного, поэтому div/dot/norm у них отсутствуют.
Для floating-instances dot(v1, v2) = v1 * v2, norm = sqrt(v * v) = |v|.
"""

from typing import Any, Final

import numpy as np

from src.vectorspace.module import S, CapabilityError, RModule
from src.vectorspace.normed import NormedSpace


# =============================================================================
# БАЗОВЫЕ КЛАССЫ
# =============================================================================


class _NativeModule(RModule[S, S]):
    """Скаляр как модуль над собой: нативные + и *."""

    def zero(self) -> S:
        return self.ring(0)

    def add(self, v1: S, v2: S) -> S:
        return v1 + v2

    def rscale(self, v: S, a: S) -> S:
        return v * a


class _NativeNormedSpace(_NativeModule[S], NormedSpace[S, S]):
    """Floating-скаляр как нормированное пространство над собой."""

    def dot(self, v1: S, v2: S) -> S:
        return v1 * v2


# =============================================================================
# INSTANCES
# =============================================================================


class IntegerModule(_NativeModule[int]):
    """int (произвольная точность) как модуль над собой."""

    ring = int


class Int64Module(_NativeModule[np.int64]):
    """numpy.int64 как модуль над собой. Overflow: wrap (семантика numpy)."""

    ring = np.int64


class DoubleSpace(_NativeNormedSpace[float]):
    """float как нормированное пространство над собой."""

    ring = float


class FloatSpace(_NativeNormedSpace[np.float32]):
    """numpy.float32 как нормированное пространство над собой."""

    ring = np.float32


INTEGER: Final[IntegerModule] = IntegerModule()
INT: Final[Int64Module] = Int64Module()
DOUBLE: Final[DoubleSpace] = DoubleSpace()
FLOAT: Final[FloatSpace] = FloatSpace()

# Скалярный тип → instance
PRIMITIVE_SPACES: Final[dict[type, RModule[Any, Any]]] = {
    int: INTEGER,
    np.int64: INT,
    float: DOUBLE,
    np.float32: FLOAT,
}


def space_for(type_or_value: Any) -> RModule[Any, Any]:
    """
    Instance для скалярного типа (или типа значения).

    Сначала поиск по точному типу, затем по MRO: numpy.float64 наследует
    float и получает DOUBLE. bool исключён: True не считается вектором INTEGER.

    Args:
        type_or_value: Скалярный тип или значение

    Returns:
        Primitive instance

    Raises:
        CapabilityError: Если instance для типа нет

    Examples:
        >>> space_for(2.5) is DOUBLE
        True
        >>> space_for(int) is INTEGER
        True
        >>> space_for(np.float64) is DOUBLE
        True
    """
    scalar_type = type_or_value if isinstance(type_or_value, type) else type(type_or_value)

    if scalar_type is not bool:
        for base in scalar_type.__mro__:
            if base in PRIMITIVE_SPACES:
                return PRIMITIVE_SPACES[base]

    raise CapabilityError(f"no primitive vector space instance for {scalar_type.__name__}")
