"""
Laws — механическая проверка законов capabilities

Законы модулей, векторных, евклидовых и нормированных пространств
оформлены как предикаты над конкретными значениями. check_laws прогоняет
все применимые к пространству законы по всем комбинациям выборки и
возвращает LawReport (Pydantic, сериализуется в JSON).

Сравнение:
- целочисленные кольца: точное
- floating-кольца: epsilon-сравнение (LawTolerance, по умолчанию из numerics)
- векторы, не являющиеся скалярами: через == или переданный equal

Ошибки скалярной арифметики (ZeroDivisionError, overflow) не
перехватываются: закон div проверяется только для ненулевых скаляров.
"""

import itertools
import logging
import numbers
from enum import Enum
from typing import Any, Callable, Iterable

from pydantic import BaseModel, Field

from src.vectorspace.inner_product import InnerProductSpace
from src.vectorspace.module import RModule
from src.vectorspace.normed import NormedSpace
from src.vectorspace.numerics import default_tolerance, scalars_equal
from src.vectorspace.vector_space import VectorSpace

logger = logging.getLogger(__name__)

Equality = Callable[[Any, Any], bool]


# =============================================================================
# ENUMS & MODELS
# =============================================================================


class Law(str, Enum):
    """Законы иерархии capabilities."""

    # RModule
    ADD_COMMUTATIVE = "add_commutative"
    SCALE_ZERO = "scale_zero"
    SCALE_DISTRIBUTIVE = "scale_distributive"
    ACTION_SIDES = "action_sides"
    NEGATE_CONSISTENT = "negate_consistent"
    SUB_CONSISTENT = "sub_consistent"
    # VectorSpace
    DIV_CONSISTENT = "div_consistent"
    # InnerProductSpace
    DOT_SYMMETRIC = "dot_symmetric"
    DOT_ADDITIVE = "dot_additive"
    DOT_HOMOGENEOUS = "dot_homogeneous"
    # NormedSpace
    NORM_HOMOGENEOUS = "norm_homogeneous"
    NORM_TRIANGLE = "norm_triangle"


class LawTolerance(BaseModel):
    """Толерантность сравнения для floating-колец."""

    rel_tol: float = Field(..., ge=0, description="Относительная толерантность")
    abs_tol: float = Field(..., ge=0, description="Абсолютная толерантность")

    model_config = {"frozen": True}


class LawViolation(BaseModel):
    """Нарушение закона на конкретных входах."""

    law: Law = Field(..., description="Нарушенный закон")
    inputs: list[str] = Field(..., description="repr() входных значений")

    model_config = {"frozen": True}


class LawReport(BaseModel):
    """Итог check_laws для одного пространства."""

    space: str = Field(..., min_length=1, description="repr() пространства")
    ring: str = Field(..., min_length=1, description="Имя ground ring")
    checked: int = Field(..., ge=0, description="Количество проверенных случаев")
    violations: list[LawViolation] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def passed(self) -> bool:
        return not self.violations

    def violated_laws(self) -> set[Law]:
        """Множество законов, нарушенных хотя бы один раз."""
        return {v.law for v in self.violations}


# =============================================================================
# СРАВНЕНИЯ
# =============================================================================


def tolerance_for(ring: Any) -> LawTolerance:
    """
    Толерантность по умолчанию для ground ring.

    Examples:
        >>> tolerance_for(int)
        LawTolerance(rel_tol=0.0, abs_tol=0.0)
    """
    rel_tol, abs_tol = default_tolerance(ring)
    return LawTolerance(rel_tol=rel_tol, abs_tol=abs_tol)


def vector_equality(space: RModule[Any, Any], tolerance: LawTolerance | None = None) -> Equality:
    """
    Равенство векторов пространства.

    Скалярные векторы (primitive instances) сравниваются с толерантностью
    кольца, остальные через ==.
    """
    tol = tolerance or tolerance_for(space.ring)

    def equal(v1: Any, v2: Any) -> bool:
        if isinstance(v1, numbers.Number) and isinstance(v2, numbers.Number):
            return scalars_equal(v1, v2, space.ring, tol.rel_tol, tol.abs_tol)
        return v1 == v2

    return equal


def _scalar_eq(space: RModule[Any, Any], a: Any, b: Any, tolerance: LawTolerance | None) -> bool:
    tol = tolerance or tolerance_for(space.ring)
    return scalars_equal(a, b, space.ring, tol.rel_tol, tol.abs_tol)


def _resolve(space: RModule[Any, Any], tolerance: LawTolerance | None, equal: Equality | None) -> Equality:
    return equal or vector_equality(space, tolerance)


# =============================================================================
# ЗАКОНЫ R-MODULE
# =============================================================================


def add_commutative(
    space: RModule[Any, Any],
    v1: Any,
    v2: Any,
    tolerance: LawTolerance | None = None,
    equal: Equality | None = None,
) -> bool:
    """v1 ^+^ v2 == v2 ^+^ v1"""
    eq = _resolve(space, tolerance, equal)
    return eq(space.add(v1, v2), space.add(v2, v1))


def scale_zero(
    space: RModule[Any, Any],
    a: Any,
    tolerance: LawTolerance | None = None,
    equal: Equality | None = None,
) -> bool:
    """a *^ zeroVector == zeroVector"""
    eq = _resolve(space, tolerance, equal)
    return eq(space.scale(a, space.zero()), space.zero())


def scale_distributive(
    space: RModule[Any, Any],
    a: Any,
    v1: Any,
    v2: Any,
    tolerance: LawTolerance | None = None,
    equal: Equality | None = None,
) -> bool:
    """a *^ (v1 ^+^ v2) == (a *^ v1) ^+^ (a *^ v2)"""
    eq = _resolve(space, tolerance, equal)
    lhs = space.scale(a, space.add(v1, v2))
    rhs = space.add(space.scale(a, v1), space.scale(a, v2))
    return eq(lhs, rhs)


def action_sides(
    space: RModule[Any, Any],
    a: Any,
    v: Any,
    tolerance: LawTolerance | None = None,
    equal: Equality | None = None,
) -> bool:
    """a *^ v == v ^* a"""
    eq = _resolve(space, tolerance, equal)
    return eq(space.scale(a, v), space.rscale(v, a))


def negate_consistent(
    space: RModule[Any, Any],
    v: Any,
    tolerance: LawTolerance | None = None,
    equal: Equality | None = None,
) -> bool:
    """negateVector v == (-1) *^ v"""
    eq = _resolve(space, tolerance, equal)
    return eq(space.negate(v), space.scale(space.ring(-1), v))


def sub_consistent(
    space: RModule[Any, Any],
    v1: Any,
    v2: Any,
    tolerance: LawTolerance | None = None,
    equal: Equality | None = None,
) -> bool:
    """v1 ^-^ v2 == v1 ^+^ negateVector v2"""
    eq = _resolve(space, tolerance, equal)
    return eq(space.sub(v1, v2), space.add(v1, space.negate(v2)))


# =============================================================================
# ЗАКОН VECTOR SPACE
# =============================================================================


def div_consistent(
    space: VectorSpace[Any, Any],
    v: Any,
    a: Any,
    tolerance: LawTolerance | None = None,
    equal: Equality | None = None,
) -> bool:
    """
    v ^/ a == (1/a) *^ v

    Raises:
        ValueError: Если a равен нулю (закон определён только для a != 0)
    """
    if a == space.ring(0):
        raise ValueError("div law is defined for non-zero scalars only")
    eq = _resolve(space, tolerance, equal)
    return eq(space.div(v, a), space.scale(space.ring(1) / a, v))


# =============================================================================
# ЗАКОНЫ INNER PRODUCT SPACE
# =============================================================================


def dot_symmetric(
    space: InnerProductSpace[Any, Any],
    v1: Any,
    v2: Any,
    tolerance: LawTolerance | None = None,
) -> bool:
    """dot v1 v2 == dot v2 v1"""
    return _scalar_eq(space, space.dot(v1, v2), space.dot(v2, v1), tolerance)


def dot_additive(
    space: InnerProductSpace[Any, Any],
    v1: Any,
    v2: Any,
    v3: Any,
    tolerance: LawTolerance | None = None,
) -> bool:
    """dot (v1 ^+^ v2) v3 == dot v1 v3 + dot v2 v3"""
    lhs = space.dot(space.add(v1, v2), v3)
    rhs = space.dot(v1, v3) + space.dot(v2, v3)
    return _scalar_eq(space, lhs, rhs, tolerance)


def dot_homogeneous(
    space: InnerProductSpace[Any, Any],
    a: Any,
    v1: Any,
    v2: Any,
    tolerance: LawTolerance | None = None,
) -> bool:
    """dot (a *^ v1) v2 == a * dot v1 v2"""
    lhs = space.dot(space.scale(a, v1), v2)
    rhs = a * space.dot(v1, v2)
    return _scalar_eq(space, lhs, rhs, tolerance)


# =============================================================================
# ЗАКОНЫ NORMED SPACE
# =============================================================================


def norm_homogeneous(
    space: NormedSpace[Any, Any],
    a: Any,
    v: Any,
    tolerance: LawTolerance | None = None,
) -> bool:
    """norm (a *^ v) == |a| * norm v"""
    lhs = space.norm(space.scale(a, v))
    rhs = abs(a) * space.norm(v)
    return _scalar_eq(space, lhs, rhs, tolerance)


def norm_triangle(
    space: NormedSpace[Any, Any],
    v1: Any,
    v2: Any,
    tolerance: LawTolerance | None = None,
) -> bool:
    """norm (v1 ^+^ v2) <= norm v1 + norm v2"""
    lhs = space.norm(space.add(v1, v2))
    rhs = space.norm(v1) + space.norm(v2)
    return lhs <= rhs or _scalar_eq(space, lhs, rhs, tolerance)


# =============================================================================
# CHECK LAWS
# =============================================================================


def check_laws(
    space: RModule[Any, Any],
    vectors: Iterable[Any],
    scalars: Iterable[Any],
    tolerance: LawTolerance | None = None,
    equal: Equality | None = None,
) -> LawReport:
    """
    Проверка всех применимых законов на выборке.

    Законы выбираются по capabilities пространства: RModule всегда,
    VectorSpace / InnerProductSpace / NormedSpace, если space им соответствует.

    Args:
        space: Проверяемое пространство
        vectors: Выборка векторов
        scalars: Выборка скаляров ground ring
        tolerance: Толерантность (default: tolerance_for(space.ring))
        equal: Равенство векторов (default: vector_equality)

    Returns:
        LawReport со всеми нарушениями
    """
    tol = tolerance or tolerance_for(space.ring)
    eq = equal or vector_equality(space, tol)
    vectors = list(vectors)
    scalars = list(scalars)

    cases: list[tuple[Law, bool, tuple[Any, ...]]] = []

    def record(law: Law, holds: bool, *inputs: Any) -> None:
        cases.append((law, holds, inputs))

    for v1, v2 in itertools.product(vectors, repeat=2):
        record(Law.ADD_COMMUTATIVE, add_commutative(space, v1, v2, tol, eq), v1, v2)
        record(Law.SUB_CONSISTENT, sub_consistent(space, v1, v2, tol, eq), v1, v2)

    for v in vectors:
        record(Law.NEGATE_CONSISTENT, negate_consistent(space, v, tol, eq), v)

    for a in scalars:
        record(Law.SCALE_ZERO, scale_zero(space, a, tol, eq), a)

    for a, v in itertools.product(scalars, vectors):
        record(Law.ACTION_SIDES, action_sides(space, a, v, tol, eq), a, v)

    for a, v1, v2 in itertools.product(scalars, vectors, vectors):
        record(Law.SCALE_DISTRIBUTIVE, scale_distributive(space, a, v1, v2, tol, eq), a, v1, v2)

    if isinstance(space, VectorSpace):
        for v, a in itertools.product(vectors, scalars):
            if a != space.ring(0):
                record(Law.DIV_CONSISTENT, div_consistent(space, v, a, tol, eq), v, a)

    if isinstance(space, InnerProductSpace):
        for v1, v2 in itertools.product(vectors, repeat=2):
            record(Law.DOT_SYMMETRIC, dot_symmetric(space, v1, v2, tol), v1, v2)
        for v1, v2, v3 in itertools.product(vectors, repeat=3):
            record(Law.DOT_ADDITIVE, dot_additive(space, v1, v2, v3, tol), v1, v2, v3)
        for a, v1, v2 in itertools.product(scalars, vectors, vectors):
            record(Law.DOT_HOMOGENEOUS, dot_homogeneous(space, a, v1, v2, tol), a, v1, v2)

    if isinstance(space, NormedSpace):
        for a, v in itertools.product(scalars, vectors):
            record(Law.NORM_HOMOGENEOUS, norm_homogeneous(space, a, v, tol), a, v)
        for v1, v2 in itertools.product(vectors, repeat=2):
            record(Law.NORM_TRIANGLE, norm_triangle(space, v1, v2, tol), v1, v2)

    violations = [
        LawViolation(law=law, inputs=[repr(x) for x in inputs])
        for law, holds, inputs in cases
        if not holds
    ]
    report = LawReport(
        space=repr(space),
        ring=space.ring.__name__,
        checked=len(cases),
        violations=violations,
    )

    if violations:
        logger.warning(
            "%r violates %d of %d law cases: %s",
            space,
            len(violations),
            len(cases),
            sorted(law.value for law in report.violated_laws()),
        )
    else:
        logger.debug("%r satisfies all %d law cases", space, len(cases))

    return report
