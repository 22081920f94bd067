"""
Tabla de operadores de la calculadora.

Cada símbolo se describe con un OperatorDescriptor: prioridad,
asociatividad, regla de evaluación y, para los delimitadores de grupo,
su papel de apertura o cierre. La tabla se construye una vez y no se
modifica después; el motor la consulta sin alterarla, así que una misma
instancia puede compartirse entre evaluaciones.
"""

from __future__ import annotations

import enum
import operator
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Optional

from calculator_errors import DivisionByZero, ResultOverflow, UnknownOperator


class Associativity(enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    NONE = "none"


@dataclass(frozen=True)
class OperatorDescriptor:
    """Descripción inmutable de un operador o delimitador."""

    symbol: str
    priority: int
    associativity: Associativity
    apply: Optional[Callable[[int, int], int]] = None
    is_group_start: bool = False
    paired_opener: Optional[str] = None

    @property
    def is_group_end(self) -> bool:
        return self.paired_opener is not None

    @property
    def is_binary(self) -> bool:
        return self.apply is not None

    def outranks(self, incoming: "OperatorDescriptor") -> bool:
        """Indica si este operador (en la pila) debe reducirse antes que `incoming`.

        A igual prioridad, los asociativos por la izquierda se reducen de
        inmediato y los asociativos por la derecha esperan.
        """
        if self.associativity is Associativity.RIGHT:
            return self.priority > incoming.priority
        return self.priority >= incoming.priority


# ── Reglas aritméticas ───────────────────────────────────────────

# Tope de cualquier valor intermedio; por debajo del límite int → str del
# intérprete (4300 dígitos) para que todo resultado pueda mostrarse.
MAX_RESULT_BITS = 14000


def _divide(lhs: int, rhs: int) -> int:
    if rhs == 0:
        raise DivisionByZero("División por cero")
    quotient = abs(lhs) // abs(rhs)
    # Truncamiento hacia cero, no hacia -∞
    return quotient if (lhs < 0) == (rhs < 0) else -quotient


def _power(base: int, exponent: int) -> int:
    if exponent >= 0:
        # |base| >= 2^(bits-1): si esa cota ya excede el tope, no se calcula
        if (abs(base).bit_length() - 1) * exponent > MAX_RESULT_BITS:
            raise ResultOverflow("Resultado demasiado grande")
        return base ** exponent
    if base == 0:
        raise DivisionByZero("Cero elevado a un exponente negativo")
    if base == 1:
        return 1
    if base == -1:
        return 1 if exponent % 2 == 0 else -1
    return 0


# ── Prioridades ──────────────────────────────────────────────────

START_SYMBOL = "#"
END_SYMBOL = "$"

START_PRIORITY = 0
END_PRIORITY = 1
ADDITIVE_PRIORITY = 2
MULTIPLICATIVE_PRIORITY = 3
POWER_PRIORITY = 4
GROUP_PRIORITY = 5


def group_family(opener: str, closer: str) -> tuple[OperatorDescriptor, OperatorDescriptor]:
    """Crea el par de descriptores para un delimitador de grupo."""
    if opener == closer:
        raise ValueError("La apertura y el cierre deben ser distintos")
    return (
        OperatorDescriptor(
            opener, GROUP_PRIORITY, Associativity.RIGHT, is_group_start=True
        ),
        OperatorDescriptor(
            closer, GROUP_PRIORITY, Associativity.LEFT, paired_opener=opener
        ),
    )


ARITHMETIC_OPERATORS = (
    OperatorDescriptor("+", ADDITIVE_PRIORITY, Associativity.LEFT, operator.add),
    OperatorDescriptor("-", ADDITIVE_PRIORITY, Associativity.LEFT, operator.sub),
    OperatorDescriptor("*", MULTIPLICATIVE_PRIORITY, Associativity.LEFT, operator.mul),
    OperatorDescriptor("/", MULTIPLICATIVE_PRIORITY, Associativity.LEFT, _divide),
    OperatorDescriptor("^", POWER_PRIORITY, Associativity.RIGHT, _power),
)


class OperatorTable:
    """Registro inmutable símbolo → OperatorDescriptor."""

    def __init__(self, descriptors: Iterable[OperatorDescriptor]):
        entries: dict[str, OperatorDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.symbol in entries:
                raise ValueError(f"Símbolo duplicado: {descriptor.symbol}")
            if descriptor.symbol in (START_SYMBOL, END_SYMBOL):
                raise ValueError(f"Símbolo reservado: {descriptor.symbol}")
            entries[descriptor.symbol] = descriptor

        for descriptor in entries.values():
            opener = descriptor.paired_opener
            if opener is not None and not (
                opener in entries and entries[opener].is_group_start
            ):
                raise ValueError(
                    f"'{descriptor.symbol}' cierra '{opener}', que no abre grupo"
                )

        self._entries: Mapping[str, OperatorDescriptor] = MappingProxyType(entries)
        self._start = OperatorDescriptor(START_SYMBOL, START_PRIORITY, Associativity.NONE)
        self._end = OperatorDescriptor(END_SYMBOL, END_PRIORITY, Associativity.NONE)

    @classmethod
    def default(cls) -> "OperatorTable":
        return cls(ARITHMETIC_OPERATORS + group_family("(", ")"))

    @property
    def start_sentinel(self) -> OperatorDescriptor:
        return self._start

    @property
    def end_sentinel(self) -> OperatorDescriptor:
        return self._end

    @property
    def symbols(self) -> frozenset[str]:
        return frozenset(self._entries)

    def __contains__(self, symbol: str) -> bool:
        return symbol in self._entries

    def lookup(self, symbol: str) -> OperatorDescriptor:
        try:
            return self._entries[symbol]
        except KeyError:
            raise UnknownOperator(f"Operador desconocido: {symbol!r}") from None


DEFAULT_TABLE = OperatorTable.default()
