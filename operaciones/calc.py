"""Operaciones aritméticas del tutorial de CI/CD."""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Union

Number = Union[int, float]


def add(a: Number, b: Number) -> Number:
    """Suma dos números."""
    return a + b


def subtract(a: Number, b: Number) -> Number:
    """Resta b de a."""
    return a - b


# Nombres originales del módulo
suma = add
resta = subtract

OPERATIONS: MappingProxyType[str, Callable[[Number, Number], Number]] = MappingProxyType(
    {"suma": add, "resta": subtract}
)
