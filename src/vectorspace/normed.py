"""
NormedSpace — нормированное пространство и нормализация

NormedSpace наследует InnerProductSpace и VectorSpace; ground field обязан
быть вещественным floating-типом (нужен sqrt).

    norm(v) = sqrt(dot(v, v))

ЗАКОНЫ:
1. norm(a *^ v) == |a| * norm(v)            (однородность)
2. norm(v1 ^+^ v2) <= norm(v1) + norm(v2)   (неравенство треугольника)

normalize — свободная функция (не часть capability):
- norm(v) != 0  →  v ^/ norm(v)
- norm(v) == 0 (точно)  →  ZeroVectorNormalization

try_normalize — тот же алгоритм с checked-результатом вместо exception.
"""

import logging
from dataclasses import dataclass
from typing import Any, Generic

from src.vectorspace.inner_product import InnerProductSpace
from src.vectorspace.module import S, V, CapabilityError
from src.vectorspace.numerics import is_floating_type, sqrt_scalar
from src.vectorspace.vector_space import VectorSpace

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NormalizationError(ArithmeticError):
    """Базовая ошибка нормализации вектора."""

    pass


class ZeroVectorNormalization(NormalizationError):
    """
    Попытка нормализовать нулевой вектор.

    Норма точно равна нулю ground field, направление не определено.
    Ошибка recoverable: вызывающий код решает, что делать дальше.
    """

    pass


# =============================================================================
# NORMED SPACE
# =============================================================================


class NormedSpace(InnerProductSpace[V, S], VectorSpace[V, S]):
    """Пространство со скалярным произведением и евклидовой нормой."""

    @classmethod
    def _check_ring(cls, ring: Any) -> None:
        super()._check_ring(ring)
        if not is_floating_type(ring):
            raise CapabilityError(
                f"{cls.__name__}: ground field {ring.__name__} does not support sqrt"
            )

    def norm(self, v: V) -> S:
        """
        Длина вектора.

        Returns:
            sqrt(dot(v, v)) в типе ground field
        """
        return sqrt_scalar(self.dot(v, v), self.ring)


# =============================================================================
# NORMALIZE
# =============================================================================


def _require_normed(space: Any) -> None:
    if not isinstance(space, NormedSpace):
        raise CapabilityError(f"{space!r} is not a normed space, cannot normalize")


def normalize(space: NormedSpace[V, S], v: V) -> V:
    """
    Единичный вектор того же направления.

    Args:
        space: Нормированное пространство
        v: Вектор

    Returns:
        v ^/ norm(v)

    Raises:
        ZeroVectorNormalization: Если norm(v) точно равна нулю
        CapabilityError: Если space не NormedSpace

    Examples:
        >>> from src.vectorspace.primitive import DOUBLE
        >>> normalize(DOUBLE, 4.0)
        1.0
    """
    _require_normed(space)

    nv = space.norm(v)
    if nv == space.ring(0):
        logger.debug("normalize rejected zero vector in %r", space)
        raise ZeroVectorNormalization("cannot normalize the zero vector")

    return space.div(v, nv)


@dataclass(frozen=True)
class NormalizationResult(Generic[V]):
    """Результат try_normalize: либо value, либо error."""

    value: V | None = None
    error: NormalizationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> V:
        """
        Значение или исходная ошибка.

        Raises:
            NormalizationError: Если нормализация не удалась
        """
        if self.error is not None:
            raise self.error
        return self.value


def try_normalize(space: NormedSpace[V, S], v: V) -> NormalizationResult[V]:
    """
    Нормализация с checked-результатом.

    Нулевой вектор не вызывает exception: ошибка возвращается в
    NormalizationResult.error. CapabilityError и ошибки скалярной
    арифметики пропагируют как есть.
    """
    try:
        return NormalizationResult(value=normalize(space, v))
    except NormalizationError as e:
        return NormalizationResult(error=e)
