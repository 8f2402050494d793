"""Módulo aritmético de ejemplo para el pipeline de CI/CD (tests + empaquetado)."""

__version__ = "1.0.0"

from operaciones.calc import OPERATIONS, Number, add, resta, subtract, suma

__all__ = ["add", "subtract", "suma", "resta", "OPERATIONS", "Number", "__version__"]
