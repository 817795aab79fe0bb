"""
vectorspace — алгебраическая иерархия векторных пространств

Capabilities (ABC с методами по умолчанию):
- RModule            модуль над кольцом
- VectorSpace        модуль над полем (+ div)
- InnerProductSpace  модуль со скалярным произведением (+ dot)
- NormedSpace        InnerProductSpace + VectorSpace (+ norm)

Primitive instances: INTEGER (int), INT (numpy.int64),
DOUBLE (float), FLOAT (numpy.float32).
"""

# Capabilities
from src.vectorspace.inner_product import InnerProductSpace
from src.vectorspace.module import CapabilityError, RModule
from src.vectorspace.normed import (
    NormalizationError,
    NormalizationResult,
    NormedSpace,
    ZeroVectorNormalization,
    normalize,
    try_normalize,
)
from src.vectorspace.vector_space import VectorSpace

# Primitive instances
from src.vectorspace.primitive import (
    DOUBLE,
    FLOAT,
    INT,
    INTEGER,
    PRIMITIVE_SPACES,
    DoubleSpace,
    FloatSpace,
    Int64Module,
    IntegerModule,
    space_for,
)

# Operator sugar
from src.vectorspace.element import Element

# Laws
from src.vectorspace.laws import (
    Law,
    LawReport,
    LawTolerance,
    LawViolation,
    check_laws,
    tolerance_for,
    vector_equality,
)

__all__ = [
    # Capabilities
    "RModule",
    "VectorSpace",
    "InnerProductSpace",
    "NormedSpace",
    # Capabilities — Exceptions
    "CapabilityError",
    "NormalizationError",
    "ZeroVectorNormalization",
    # Capabilities — Functions
    "NormalizationResult",
    "normalize",
    "try_normalize",
    # Primitive instances
    "INTEGER",
    "INT",
    "DOUBLE",
    "FLOAT",
    "PRIMITIVE_SPACES",
    "IntegerModule",
    "Int64Module",
    "DoubleSpace",
    "FloatSpace",
    "space_for",
    # Operator sugar
    "Element",
    # Laws
    "Law",
    "LawReport",
    "LawTolerance",
    "LawViolation",
    "check_laws",
    "tolerance_for",
    "vector_equality",
]
