"""
RModule — модуль над кольцом (R-module)

Модуль над ground ring S — абелева группа с линейным умножением на скаляр.
Space-объект (witness) несёт операции для одного типа векторов V;
ground ring задаётся атрибутом класса `ring`.

Минимальное определение:
- ring
- zero()
- add(v1, v2)
- scale(a, v) ИЛИ rscale(v, a) (второе выводится из первого)

Нотация:
    scale(a, v)   ≡  a *^ v
    rscale(v, a)  ≡  v ^* a
    add(v1, v2)   ≡  v1 ^+^ v2
    sub(v1, v2)   ≡  v1 ^-^ v2

ЗАКОНЫ (обязательны для любой реализации):
1. add(v1, v2) == add(v2, v1)
2. scale(a, zero()) == zero()
3. scale(a, add(v1, v2)) == add(scale(a, v1), scale(a, v2))
4. scale(a, v) == rscale(v, a)
5. negate(v) == scale(-1, v)
6. sub(v1, v2) == add(v1, negate(v2))

Законы проверяются механически в src.vectorspace.laws.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

from src.vectorspace.numerics import is_ring_type

V = TypeVar("V")
S = TypeVar("S")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CapabilityError(TypeError):
    """
    Нарушение контракта capability.

    Возникает при:
    - определении класса без scale и без rscale
    - ground ring, не удовлетворяющем требованиям capability
      (например, int для VectorSpace)
    - использовании операции, которой у пространства нет
    """

    pass


def _has_abstract_members(cls: type) -> bool:
    # __abstractmethods__ ещё не вычислен во время __init_subclass__
    return any(
        getattr(getattr(cls, name, None), "__isabstractmethod__", False)
        for name in dir(cls)
    )


# =============================================================================
# R-MODULE
# =============================================================================


class RModule(ABC, Generic[V, S]):
    """
    R-модуль: абелева группа V с действием ground ring S.

    Conformance проверяется при определении класса:
    - ring (если задан) должен быть числовым типом
    - конкретный класс обязан переопределить scale или rscale
    """

    ring: ClassVar[type | None] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)

        if cls.ring is None:
            return

        cls._check_ring(cls.ring)

        if _has_abstract_members(cls):
            return

        if cls.scale is RModule.scale and cls.rscale is RModule.rscale:
            raise CapabilityError(
                f"{cls.__name__}: minimal definition requires scale or rscale"
            )

    def __new__(cls, *args: Any, **kwargs: Any) -> "RModule[V, S]":
        if cls.ring is None:
            raise CapabilityError(f"{cls.__name__}: ground ring is not bound")
        return super().__new__(cls)

    @classmethod
    def _check_ring(cls, ring: Any) -> None:
        """
        Проверка требований к ground ring.

        Capability-наследники расширяют проверку через super().

        Raises:
            CapabilityError: Если ring не числовой тип
        """
        if not is_ring_type(ring):
            raise CapabilityError(
                f"{cls.__name__}: ground ring {ring!r} must be a numeric type"
            )

    # -------------------------------------------------------------------------
    # Минимальное определение
    # -------------------------------------------------------------------------

    @abstractmethod
    def zero(self) -> V:
        """Нулевой вектор (zeroVector)."""

    @abstractmethod
    def add(self, v1: V, v2: V) -> V:
        """Сложение векторов (v1 ^+^ v2)."""

    def scale(self, a: S, v: V) -> V:
        """
        Левое действие скаляра (a *^ v).

        По умолчанию: rscale с переставленными аргументами.
        """
        return self.rscale(v, a)

    def rscale(self, v: V, a: S) -> V:
        """
        Правое действие скаляра (v ^* a).

        По умолчанию: scale с переставленными аргументами.
        """
        return self.scale(a, v)

    # -------------------------------------------------------------------------
    # Производные операции
    # -------------------------------------------------------------------------

    def negate(self, v: V) -> V:
        """
        Противоположный вектор.

        negateVector v = (-1) *^ v
        """
        return self.scale(self.ring(-1), v)

    def sub(self, v1: V, v2: V) -> V:
        """
        Разность векторов.

        v1 ^-^ v2 = v1 ^+^ negateVector v2
        """
        return self.add(v1, self.negate(v2))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(ring={self.ring.__name__})"
