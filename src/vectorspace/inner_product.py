"""
InnerProductSpace — модуль со скалярным произведением

dot(v1, v2) -> S, симметричное билинейное отображение в ground field.

ЗАКОНЫ:
1. dot(v1, v2) == dot(v2, v1)
2. dot(v1 ^+^ v2, v3) == dot(v1, v3) + dot(v2, v3)
3. dot(a *^ v1, v2) == a * dot(v1, v2)

Реализации по умолчанию нет: каждый тип задаёт dot сам.
"""

from abc import abstractmethod

from src.vectorspace.module import S, V, RModule


class InnerProductSpace(RModule[V, S]):
    """Модуль со скалярным произведением."""

    @abstractmethod
    def dot(self, v1: V, v2: V) -> S:
        """Скалярное произведение векторов."""
