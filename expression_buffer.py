"""Texto acumulado por el teclado de la calculadora, sin dependencias gráficas."""

from __future__ import annotations

import logging


logger = logging.getLogger(__name__)

ERROR_PREFIX = "Error: "


class ExpressionBuffer:
    """Acumula pulsaciones y delega la evaluación en el motor.

    Tras mostrar un resultado, un operador continúa la expresión a partir
    de él; un dígito, un paréntesis o cualquier tecla después de un error
    empiezan una expresión nueva.
    """

    def __init__(self, engine):
        self._engine = engine
        self._text = ""
        self._showing_result = False

    @property
    def text(self) -> str:
        return self._text

    @property
    def showing_result(self) -> bool:
        return self._showing_result

    def insert(self, text: str) -> str:
        if self._showing_result:
            if self._text.startswith(ERROR_PREFIX) or text[:1].isdigit() or text[:1] == "(":
                self._text = ""
            elif self._text.startswith("-"):
                # Sin operadores unarios: un resultado negativo se reescribe como resta
                self._text = f"(0{self._text})"
            self._showing_result = False
        self._text += text
        return self._text

    def backspace(self) -> str:
        if self._showing_result:
            return self.clear()
        self._text = self._text[:-1]
        return self._text

    def clear(self) -> str:
        self._text = ""
        self._showing_result = False
        return self._text

    def evaluate(self) -> str:
        """Sustituye el texto por el resultado, o por un indicador de error."""
        expression = self._text
        if self._showing_result or not expression.strip():
            return self._text

        try:
            self._text = self._engine.evaluate(expression)
        except (ValueError, ArithmeticError) as exc:
            logger.info("Evaluación fallida de %r: %s", expression, exc)
            msg = str(exc) if str(exc) else type(exc).__name__
            self._text = f"{ERROR_PREFIX}{msg}"

        self._showing_result = True
        return self._text
