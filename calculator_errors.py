"""
Errores de evaluación de la calculadora.

Todos heredan de CalculatorError (a su vez ValueError), de modo que la
interfaz puede capturarlos con una sola cláusula. Cada clase lleva una
etiqueta `kind` que distingue el tipo de fallo sin inspeccionar el mensaje.
"""

from __future__ import annotations


class CalculatorError(ValueError):
    """Error terminal de una evaluación."""

    kind = "error"

    def __init__(self, message: str, position: int | None = None):
        super().__init__(message)
        self.message = message
        self.position = position

    def __str__(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} (posición {self.position})"


class InvalidToken(CalculatorError):
    """Fragmento de texto que no es número ni delimitador."""

    kind = "invalid_token"


class UnknownOperator(CalculatorError):
    """Símbolo ausente de la tabla de operadores."""

    kind = "unknown_operator"


class UnmatchedGroup(CalculatorError):
    """Cierre sin apertura, o grupo que nunca se cierra."""

    kind = "unmatched_group"


class StackUnderflow(CalculatorError):
    """Operandos y operadores mal dispuestos."""

    kind = "stack_underflow"


class DivisionByZero(CalculatorError, ZeroDivisionError):
    """Divisor nulo."""

    kind = "division_by_zero"


class ResultOverflow(CalculatorError, OverflowError):
    """Valor intermedio o final fuera del tamaño admitido."""

    kind = "overflow"
