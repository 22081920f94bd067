"""Punto de entrada de la calculadora."""

import argparse
import logging
import sys

from calculator_engine import CalculatorEngine


WINDOW_GEOMETRY = "340x420"
WINDOW_MIN_SIZE = (300, 380)
LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Calculadora de enteros")
    parser.add_argument(
        "--expr",
        help="evalúa la expresión, imprime el resultado y termina sin abrir la ventana",
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def run_once(expression: str, engine=None) -> int:
    """Evalúa una expresión desde la línea de órdenes; devuelve el código de salida."""
    engine = engine if engine is not None else CalculatorEngine()
    try:
        print(engine.evaluate(expression))
    except (ValueError, ArithmeticError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    if args.expr is not None:
        return run_once(args.expr)

    import tkinter as tk

    from calculator_ui import CalculatorApp

    root = tk.Tk()
    root.geometry(WINDOW_GEOMETRY)
    root.minsize(*WINDOW_MIN_SIZE)
    CalculatorApp(root, engine=CalculatorEngine())
    logger.info("Ventana iniciada")
    root.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
