"""
Element — операторный синтаксис над space-объектами

Element связывает значение с его пространством и отображает операции
capabilities на операторы Python:

    e1 + e2     add
    e1 - e2     sub
    -e          negate
    a * e       scale    (a *^ v)
    e * a       rscale   (v ^* a)
    e / a       div      (только VectorSpace)
    e1 @ e2     dot      (только InnerProductSpace)
    abs(e)      norm     (только NormedSpace)

Операция, которой у пространства нет, даёт TypeError (для бинарных
операторов через NotImplemented, как у встроенных типов).
"""

from dataclasses import dataclass
from typing import Any, Generic

from src.vectorspace.inner_product import InnerProductSpace
from src.vectorspace.module import S, V, CapabilityError, RModule
from src.vectorspace.normed import NormedSpace, normalize
from src.vectorspace.vector_space import VectorSpace


@dataclass(frozen=True)
class Element(Generic[V, S]):
    """Вектор вместе с пространством, которому он принадлежит."""

    space: RModule[V, S]
    value: V

    # numpy-скаляры слева от оператора уступают нашим __r*__
    __array_ufunc__ = None

    @classmethod
    def zero(cls, space: RModule[V, S]) -> "Element[V, S]":
        return cls(space, space.zero())

    def _wrap(self, value: V) -> "Element[V, S]":
        return Element(self.space, value)

    def _same_space(self, other: "Element[Any, Any]") -> None:
        if other.space is not self.space:
            raise CapabilityError(
                f"cannot combine elements of {self.space!r} and {other.space!r}"
            )

    # -------------------------------------------------------------------------
    # RModule
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "Element[V, S]":
        if not isinstance(other, Element):
            return NotImplemented
        self._same_space(other)
        return self._wrap(self.space.add(self.value, other.value))

    def __sub__(self, other: Any) -> "Element[V, S]":
        if not isinstance(other, Element):
            return NotImplemented
        self._same_space(other)
        return self._wrap(self.space.sub(self.value, other.value))

    def __neg__(self) -> "Element[V, S]":
        return self._wrap(self.space.negate(self.value))

    def __mul__(self, a: Any) -> "Element[V, S]":
        if isinstance(a, Element):
            return NotImplemented
        return self._wrap(self.space.rscale(self.value, a))

    def __rmul__(self, a: Any) -> "Element[V, S]":
        if isinstance(a, Element):
            return NotImplemented
        return self._wrap(self.space.scale(a, self.value))

    # -------------------------------------------------------------------------
    # VectorSpace / InnerProductSpace / NormedSpace
    # -------------------------------------------------------------------------

    def __truediv__(self, a: Any) -> "Element[V, S]":
        if isinstance(a, Element) or not isinstance(self.space, VectorSpace):
            return NotImplemented
        return self._wrap(self.space.div(self.value, a))

    def __matmul__(self, other: Any) -> S:
        if not isinstance(other, Element) or not isinstance(self.space, InnerProductSpace):
            return NotImplemented
        self._same_space(other)
        return self.space.dot(self.value, other.value)

    def norm(self) -> S:
        if not isinstance(self.space, NormedSpace):
            raise CapabilityError(f"{self.space!r} has no norm")
        return self.space.norm(self.value)

    def __abs__(self) -> S:
        return self.norm()

    def normalize(self) -> "Element[V, S]":
        """
        Единичный вектор.

        Raises:
            ZeroVectorNormalization: Для нулевого вектора
        """
        return self._wrap(normalize(self.space, self.value))
