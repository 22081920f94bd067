"""
Shared pytest fixtures for the calculator tests.

Each test gets a fresh evaluator; the default operator table is immutable
and shared between them.
"""

import pytest

from calculator_engine import CalculatorEngine
from formula_evaluator import FormulaEvaluator
from operator_table import ARITHMETIC_OPERATORS, OperatorTable, group_family
from tokenizer import Tokenizer


@pytest.fixture
def evaluator():
    return FormulaEvaluator()


@pytest.fixture
def engine(evaluator):
    return CalculatorEngine(evaluator)


@pytest.fixture
def bracket_evaluator():
    """Evaluator whose table has two grouping families: ( ) and [ ]."""
    table = OperatorTable(
        ARITHMETIC_OPERATORS + group_family("(", ")") + group_family("[", "]")
    )
    return FormulaEvaluator(table, Tokenizer("+-*/^()[]"))
