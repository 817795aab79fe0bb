"""
Общие fixtures для unit-тестов

PlaneSpace — двумерное евклидово пространство на кортежах (x, y).
Задаёт только rscale: scale выводится по умолчанию.
"""

import pytest

from src.vectorspace import NormedSpace


class PlaneSpace(NormedSpace[tuple[float, float], float]):
    """R² на кортежах float."""

    ring = float

    def zero(self) -> tuple[float, float]:
        return (0.0, 0.0)

    def add(self, v1: tuple[float, float], v2: tuple[float, float]) -> tuple[float, float]:
        return (v1[0] + v2[0], v1[1] + v2[1])

    def rscale(self, v: tuple[float, float], a: float) -> tuple[float, float]:
        return (v[0] * a, v[1] * a)

    def dot(self, v1: tuple[float, float], v2: tuple[float, float]) -> float:
        return v1[0] * v2[0] + v1[1] * v2[1]


@pytest.fixture(scope="session")
def plane() -> PlaneSpace:
    """Session-scoped: совместимо с hypothesis @given."""
    return PlaneSpace()
