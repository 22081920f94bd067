"""
Motor de cálculo para la calculadora de enteros.

Este módulo provee la clase CalculatorEngine, la fachada que usa la
interfaz: recibe el texto acumulado por el teclado, lo evalúa con
FormulaEvaluator y devuelve el resultado listo para mostrar.

Contrato de interfaz:
    - evaluate(expression: str) -> str
"""

from __future__ import annotations

from formula_evaluator import FormulaEvaluator


class CalculatorEngine:
    """Evalúa expresiones aritméticas enteras y formatea el resultado."""

    def __init__(self, evaluator: FormulaEvaluator | None = None):
        self._evaluator = evaluator if evaluator is not None else FormulaEvaluator()

    # ── Evaluación principal ─────────────────────────────────────

    def evaluate(self, expression: str) -> str:
        """Evalúa la expresión y devuelve el resultado como cadena.

        Raises:
            CalculatorError: expresión inválida, grupo sin pareja,
                operandos insuficientes, división por cero o resultado
                demasiado grande.
        """
        result = self._evaluator.evaluate(expression)
        return self._format_result(result)

    # ── Formato del resultado ────────────────────────────────────

    @staticmethod
    def _format_result(value: int) -> str:
        return str(value)
