"""
VectorSpace — векторное пространство над полем

Векторное пространство — модуль, ground ring которого является полем
(коммутативное кольцо с обратными). Ground field = ground ring.

Добавляет деление на скаляр:
    div(v, a)  ≡  v ^/ a  =  (1/a) *^ v

ЗАКОН: v ^/ a == (1/a) *^ v. Реализация по умолчанию и есть закон;
переопределение обязано оставаться наблюдаемо равным.

Деление на ноль не защищается: поведение наследуется от скалярного типа
(float → ZeroDivisionError, numpy.float32 → inf/nan, Fraction → ZeroDivisionError).
"""

from typing import Any

from src.vectorspace.module import S, V, CapabilityError, RModule
from src.vectorspace.numerics import is_field_type


class VectorSpace(RModule[V, S]):
    """
    Модуль над полем.

    Целочисленные кольца (int, numpy.int64) отклоняются при определении
    класса: у них нет общего мультипликативного обратного.
    """

    @classmethod
    def _check_ring(cls, ring: Any) -> None:
        super()._check_ring(ring)
        if not is_field_type(ring):
            raise CapabilityError(
                f"{cls.__name__}: ground ring {ring.__name__} is not a field "
                f"(no multiplicative inverses)"
            )

    @property
    def field(self) -> type:
        """Ground field (совпадает с ground ring)."""
        return self.ring

    def div(self, v: V, a: S) -> V:
        """
        Деление вектора на скаляр (v ^/ a).

        Args:
            v: Вектор
            a: Ненулевой скаляр ground field

        Returns:
            (1/a) *^ v
        """
        return self.scale(self.ring(1) / a, v)
