#!/usr/bin/env python3
"""
keystore_report - CLI que carga claves candidatas en un Keystore y reporta
cuáles se admitieron y por qué se rechazaron las demás.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Iterable, TextIO

from keystore import Keystore
from keystore.validation import rejection_reason

logger = logging.getLogger("keystore_report")

# Ancho máximo de la columna de clave en la salida de texto
KEY_COLUMN_WIDTH = 30


@dataclass
class AddResult:
    """Resultado de añadir una línea al Keystore."""
    line: int
    key: str
    accepted: bool
    reason: str | None


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parsea argumentos del CLI."""
    parser = argparse.ArgumentParser(
        description="Carga claves (una por línea) en un Keystore y reporta el resultado."
    )
    parser.add_argument(
        "--input",
        default="-",
        metavar="PATH",
        help="Fichero de claves, una por línea; '-' para stdin (default: -)",
    )
    parser.add_argument(
        "--out",
        choices=("json", "text"),
        default="json",
        help="Formato de salida: json o text (default: json)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fallar con exit 1 si alguna clave fue rechazada",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log de depuración en stderr",
    )
    return parser.parse_args(argv)


def read_candidates(stream: TextIO) -> list[str]:
    """Lee las líneas quitando solo el salto de línea final."""
    return [line.rstrip("\r\n") for line in stream]


def load_keys(keystore: Keystore, candidates: Iterable[str]) -> list[AddResult]:
    """Intenta añadir cada candidata y devuelve un resultado por línea."""
    results: list[AddResult] = []
    for number, key in enumerate(candidates, start=1):
        reason = rejection_reason(key, keystore.size(), keystore.MAX_CAPACITY)
        accepted = keystore.add(key)
        results.append(AddResult(number, key, accepted, None if accepted else reason))
    return results


def build_report(keystore: Keystore, results: list[AddResult]) -> dict:
    """Construye el reporte para salida JSON."""
    return {
        "capacity": keystore.MAX_CAPACITY,
        "size": keystore.size(),
        "accepted": sum(1 for r in results if r.accepted),
        "rejected": sum(1 for r in results if not r.accepted),
        "keys": keystore.keys(),
        "results": [asdict(r) for r in results],
        "timestamp": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
    }


def output_json(report: dict) -> None:
    """Imprime el reporte en JSON."""
    print(json.dumps(report, indent=2, ensure_ascii=False))


def output_text(report: dict) -> None:
    """Imprime el reporte como tabla en consola."""
    w = KEY_COLUMN_WIDTH
    sep = "+" + "-" * 8 + "+" + "-" * (w + 2) + "+" + "-" * 6 + "+" + "-" * 16 + "+"
    head = "| {:>6} | {:<{w}} | {:^4} | {:<14} |".format("Line", "Key", "OK", "Reason", w=w)
    print(f"keystore_report — {report['size']}/{report['capacity']} claves")
    print(f"Accepted: {report['accepted']}  Rejected: {report['rejected']}  ({report['timestamp']})")
    print(sep)
    print(head)
    print(sep)
    for r in report["results"]:
        key = repr(r["key"])[:w]
        ok = "yes" if r["accepted"] else "no"
        print("| {:>6} | {:<{w}} | {:^4} | {:<14} |".format(
            r["line"], key, ok, (r["reason"] or "-")[:14], w=w
        ))
    print(sep)


def main(argv: list[str] | None = None) -> int:
    """Punto de entrada."""
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    try:
        if args.input == "-":
            candidates = read_candidates(sys.stdin)
        else:
            with open(args.input, encoding="utf-8") as f:
                candidates = read_candidates(f)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: no se pudo leer la entrada: {exc}", file=sys.stderr)
        return 1

    keystore = Keystore()
    results = load_keys(keystore, candidates)
    logger.debug("Cargadas %d claves de %d líneas", keystore.size(), len(results))
    report = build_report(keystore, results)

    if args.out == "text":
        output_text(report)
    else:
        output_json(report)

    if args.strict and report["rejected"]:
        print(
            f"{report['rejected']} clave(s) rechazada(s).",
            file=sys.stderr,
        )
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
