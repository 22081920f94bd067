"""Separación de una expresión en números y símbolos de operador."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Union

from calculator_errors import InvalidToken


DEFAULT_DELIMITERS = "+-*/^()"

# Glifos que muestra el teclado en pantalla
_ALIASES = {
    "×": "*",
    "÷": "/",
    "−": "-",
}

# Un literal más largo no cabe en el tope de resultados del motor
MAX_LITERAL_DIGITS = 4000


@dataclass(frozen=True)
class Number:
    value: int
    position: int = 0


@dataclass(frozen=True)
class OperatorSymbol:
    symbol: str
    position: int = 0


Token = Union[Number, OperatorSymbol]


class Tokenizer:
    """Divide texto en tokens usando un conjunto fijo de delimitadores.

    Cada delimitador es un único carácter. Los espacios se descartan, las
    secuencias maximales de dígitos se convierten en Number y cualquier otro
    fragmento produce InvalidToken.
    """

    def __init__(self, delimiters: str = DEFAULT_DELIMITERS):
        if not delimiters:
            raise ValueError("Se necesita al menos un delimitador")
        if any(c.isdigit() or c.isspace() for c in delimiters):
            raise ValueError("Los delimitadores no pueden ser dígitos ni espacios")

        self._delimiters = delimiters
        self._aliases = {
            glyph: target
            for glyph, target in _ALIASES.items()
            if target in delimiters and glyph not in delimiters
        }
        escaped = "".join(re.escape(c) for c in delimiters)
        self._pattern = re.compile(
            rf"(?P<number>[0-9]+)"
            rf"|(?P<symbol>[{escaped}])"
            rf"|(?P<space>\s+)"
            rf"|(?P<invalid>[^0-9\s{escaped}]+)"
        )

    @property
    def delimiters(self) -> str:
        return self._delimiters

    def tokenize(self, expression: str) -> Iterator[Token]:
        """Genera los tokens de `expression` de forma perezosa."""
        text = self._normalize(expression)

        for match in self._pattern.finditer(text):
            kind = match.lastgroup
            if kind == "number":
                digits = match.group()
                if len(digits) > MAX_LITERAL_DIGITS:
                    raise InvalidToken(
                        f"Número de más de {MAX_LITERAL_DIGITS} dígitos", match.start()
                    )
                yield Number(int(digits), match.start())
            elif kind == "symbol":
                yield OperatorSymbol(match.group(), match.start())
            elif kind == "invalid":
                raise InvalidToken(
                    f"Token inválido: {match.group()!r}", match.start()
                )

    def _normalize(self, expression: str) -> str:
        for glyph, ascii_symbol in self._aliases.items():
            expression = expression.replace(glyph, ascii_symbol)
        return expression


_DEFAULT_TOKENIZER = Tokenizer()


def tokenize(expression: str) -> Iterator[Token]:
    return _DEFAULT_TOKENIZER.tokenize(expression)
