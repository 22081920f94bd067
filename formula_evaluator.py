"""
Evaluación de expresiones enteras mediante shunting-yard.

El motor recorre los tokens una sola vez. Los números van a la pila de
operandos; cada operador decide si primero hay que reducir (sacar un
operador y dos operandos, aplicar, apilar el resultado) o si basta con
apilarlo. Los delimitadores de grupo levantan una barrera: mientras un
grupo es el más interno abierto, ninguna reducción lo atraviesa, de modo
que su contenido se resuelve aislado del resto de la expresión.
"""

from __future__ import annotations

import logging
from typing import Iterable

from calculator_errors import ResultOverflow, StackUnderflow, UnmatchedGroup
from operator_table import DEFAULT_TABLE, MAX_RESULT_BITS, OperatorDescriptor, OperatorTable
from tokenizer import Number, Token, Tokenizer


logger = logging.getLogger(__name__)


class _EvaluationState:
    """Pilas de una única evaluación; se descartan al terminar."""

    def __init__(self, start: OperatorDescriptor):
        self.start = start
        self.operands: list[int] = []
        self.operators: list[OperatorDescriptor] = [start]
        self.groups: list[OperatorDescriptor] = []
        self.expect_operand = True

    @property
    def top(self) -> OperatorDescriptor:
        return self.operators[-1]

    def is_barrier(self, descriptor: OperatorDescriptor) -> bool:
        if descriptor is self.start:
            return True
        return bool(self.groups) and descriptor is self.groups[-1]

    def reduce(self, position: int):
        descriptor = self.top
        if descriptor is self.start or not descriptor.is_binary:
            raise StackUnderflow("No hay operador que reducir", position)
        if len(self.operands) < 2:
            raise StackUnderflow(
                f"Faltan operandos para '{descriptor.symbol}'", position
            )

        self.operators.pop()
        rhs = self.operands.pop()
        lhs = self.operands.pop()
        result = descriptor.apply(lhs, rhs)
        if result.bit_length() > MAX_RESULT_BITS:
            raise ResultOverflow(
                f"Resultado demasiado grande en '{descriptor.symbol}'", position
            )
        logger.debug("reduce %s %s %s = %s", lhs, descriptor.symbol, rhs, result)
        self.operands.append(result)


class FormulaEvaluator:
    """Evalúa expresiones infijas con +, -, *, /, ^ y grupos."""

    def __init__(self, table: OperatorTable = DEFAULT_TABLE, tokenizer: Tokenizer | None = None):
        self._table = table
        self._tokenizer = tokenizer if tokenizer is not None else Tokenizer()

    @property
    def table(self) -> OperatorTable:
        return self._table

    @property
    def tokenizer(self) -> Tokenizer:
        return self._tokenizer

    def evaluate(self, expression: str) -> int:
        """Evalúa la expresión y devuelve su valor entero.

        Raises:
            InvalidToken: fragmento que no es número ni delimitador.
            UnknownOperator: delimitador ausente de la tabla.
            UnmatchedGroup: cierre sin apertura o grupo sin cerrar.
            StackUnderflow: operandos u operadores mal dispuestos.
            DivisionByZero: divisor nulo.
            ResultOverflow: valor fuera del tamaño admitido.
        """
        result = self.evaluate_tokens(self._tokenizer.tokenize(expression))
        logger.debug("%r -> %s", expression, result)
        return result

    def evaluate_tokens(self, tokens: Iterable[Token]) -> int:
        state = _EvaluationState(self._table.start_sentinel)
        position = 0

        for token in tokens:
            position = token.position
            if isinstance(token, Number):
                self._push_operand(state, token.value, position)
                continue

            descriptor = self._table.lookup(token.symbol)
            if descriptor.is_group_end:
                self._close_group(state, descriptor, position)
            else:
                self._push_operator(state, descriptor, position)

        return self._finish(state, position)

    # ── Transiciones ─────────────────────────────────────────────

    @staticmethod
    def _push_operand(state: _EvaluationState, value: int, position: int):
        if not state.expect_operand:
            raise StackUnderflow("Falta un operador antes del número", position)
        if value.bit_length() > MAX_RESULT_BITS:
            raise ResultOverflow("Número demasiado grande", position)
        state.operands.append(value)
        state.expect_operand = False

    @staticmethod
    def _push_operator(state: _EvaluationState, descriptor: OperatorDescriptor, position: int):
        if descriptor.is_group_start:
            if not state.expect_operand:
                raise StackUnderflow(
                    f"Falta un operador antes de '{descriptor.symbol}'", position
                )
            state.groups.append(descriptor)
            state.operators.append(descriptor)
            return

        if state.expect_operand:
            raise StackUnderflow(
                f"Falta un operando antes de '{descriptor.symbol}'", position
            )

        while not state.is_barrier(state.top) and state.top.outranks(descriptor):
            state.reduce(position)

        state.operators.append(descriptor)
        state.expect_operand = True

    @staticmethod
    def _close_group(state: _EvaluationState, closer: OperatorDescriptor, position: int):
        if not state.groups or state.groups[-1].symbol != closer.paired_opener:
            raise UnmatchedGroup(
                f"'{closer.symbol}' sin '{closer.paired_opener}' que lo abra", position
            )
        if state.expect_operand:
            raise StackUnderflow(
                f"Falta un operando antes de '{closer.symbol}'", position
            )

        opener = state.groups[-1]
        while state.top is not opener:
            state.reduce(position)

        state.operators.pop()
        state.groups.pop()

    def _finish(self, state: _EvaluationState, position: int) -> int:
        end = self._table.end_sentinel

        if not state.operands and len(state.operators) == 1:
            raise StackUnderflow("Expresión vacía")
        if state.expect_operand:
            raise StackUnderflow("La expresión termina sin operando", position)

        while not state.is_barrier(state.top) and state.top.outranks(end):
            state.reduce(position)

        if state.groups:
            opener = state.groups[-1]
            raise UnmatchedGroup(f"'{opener.symbol}' sin cerrar", position)
        if len(state.operands) != 1 or state.top is not state.start:
            raise StackUnderflow("Expresión mal formada", position)

        return state.operands[0]


_DEFAULT_EVALUATOR = FormulaEvaluator()


def evaluate(expression: str) -> int:
    """Evalúa `expression` con la tabla y el tokenizador por defecto."""
    return _DEFAULT_EVALUATOR.evaluate(expression)
