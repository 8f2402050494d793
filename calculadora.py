#!/usr/bin/env python3
"""
calculadora - CLI que ejecuta una operación de operaciones.calc e imprime el resultado.
Es el punto de entrada de la imagen de contenedor: calcula, imprime y termina.
"""

from __future__ import annotations

import argparse
import json
import math
import sys
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Sequence

from operaciones import OPERATIONS, Number

# Símbolo usado en la salida de texto
SYMBOLS = {"suma": "+", "resta": "-"}


@dataclass
class Report:
    """Resultado de una operación."""
    operation: str
    a: Number
    b: Number
    result: Number
    timestamp: str


def parse_number(token: str) -> Number:
    """Convierte un argumento en int si es posible, si no en float finito."""
    try:
        return int(token)
    except ValueError:
        pass
    try:
        value = float(token)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{token}' no es un número") from None
    if not math.isfinite(value):
        raise argparse.ArgumentTypeError(f"'{token}' no es un número finito")
    return value


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parsea argumentos del CLI."""
    parser = argparse.ArgumentParser(
        prog="calculadora",
        description="Ejecuta una suma o una resta y muestra el resultado.",
    )
    parser.add_argument("operation", choices=sorted(OPERATIONS), help="Operación a ejecutar")
    parser.add_argument("a", type=parse_number, help="Primer operando")
    parser.add_argument("b", type=parse_number, help="Segundo operando")
    parser.add_argument(
        "--out",
        choices=("json", "text"),
        default="json",
        help="Formato de salida: json o text (default: json)",
    )
    parser.add_argument(
        "--expect",
        type=parse_number,
        default=None,
        metavar="N",
        help="En CI: fallar con exit 1 si el resultado no es N",
    )
    return parser.parse_args(argv)


def run(operation: str, a: Number, b: Number) -> Report:
    """Ejecuta la operación y construye el reporte."""
    result = OPERATIONS[operation](a, b)
    return Report(
        operation=operation,
        a=a,
        b=b,
        result=result,
        timestamp=datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
    )


def output_json(report: Report) -> None:
    """Imprime el reporte en JSON."""
    print(json.dumps(asdict(report), indent=2, ensure_ascii=False))


def output_text(report: Report) -> None:
    """Imprime el reporte en una línea."""
    symbol = SYMBOLS[report.operation]
    print(f"{report.a} {symbol} {report.b} = {report.result}  ({report.timestamp})")


def main(argv: Sequence[str] | None = None) -> int:
    """Punto de entrada."""
    args = parse_args(argv)
    report = run(args.operation, args.a, args.b)

    if args.out == "text":
        output_text(report)
    else:
        output_json(report)

    if args.expect is not None and report.result != args.expect:
        print(
            f"Resultado {report.result} distinto del esperado {args.expect}.",
            file=sys.stderr,
        )
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
