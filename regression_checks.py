from calculator_engine import CalculatorEngine
from calculator_errors import (
	CalculatorError,
	DivisionByZero,
	InvalidToken,
	ResultOverflow,
	StackUnderflow,
	UnknownOperator,
	UnmatchedGroup,
)
from formula_evaluator import FormulaEvaluator
import sys


_VALUE_CASES = [
	("8-3-2", "3"),
	("2^3^2", "512"),
	("1+2*3", "7"),
	("(1+2)*3", "9"),
	("((1+2)*(3+4))", "21"),
	("7/2", "3"),
	("(0-7)/2", "-3"),
	("2*3^2", "18"),
	("100/10/5", "2"),
	("2^(1-3)", "0"),
	(" 12 +  30 ", "42"),
	("6÷2×(1+2)", "9"),
]

_ERROR_CASES = [
	("5/0", DivisionByZero),
	("(1+2", UnmatchedGroup),
	("1+2)", UnmatchedGroup),
	("1+", StackUnderflow),
	("+1", StackUnderflow),
	("()", StackUnderflow),
	("", StackUnderflow),
	("1@2", (InvalidToken, UnknownOperator)),
	("9^9^9", ResultOverflow),
	("1" * 5000, InvalidToken),
]


def _outcome(engine: CalculatorEngine, expr: str) -> str:
	try:
		return engine.evaluate(expr)
	except CalculatorError as exc:
		return type(exc).__name__


def inspect_expression(expr: str) -> None:
	"""Imprime tokens y resultado de una expresión."""
	evaluator = FormulaEvaluator()
	engine = CalculatorEngine(evaluator)

	print("Expression inspection")
	print(f"expr:     {expr!r}")
	try:
		tokens = list(evaluator.tokenizer.tokenize(expr))
	except CalculatorError as exc:
		print(f"tokens:   {type(exc).__name__}: {exc}")
	else:
		print("tokens:")
		for token in tokens:
			print(f"  {token}")
	print(f"result:   {_outcome(engine, expr)}")


def run_regressions() -> None:
	checks: list[tuple[str, bool]] = []
	expected_actual: list[tuple[str, str, str]] = []
	engine = CalculatorEngine()

	for expr, expected in _VALUE_CASES:
		actual = _outcome(engine, expr)
		expected_actual.append((expr, expected, actual))
		checks.append((f"{expr} evaluates to {expected}", actual == expected))

	for expr, expected_error in _ERROR_CASES:
		try:
			engine.evaluate(expr)
		except expected_error:
			ok = True
		except CalculatorError:
			ok = False
		else:
			ok = False
		label = expr if len(expr) <= 20 else f"{expr[:17]}..."
		checks.append((f"{label!r} raises {getattr(expected_error, '__name__', expected_error)}", ok))

	first = [_outcome(engine, "((1+2)*(3+4))") for _ in range(3)]
	_outcome(engine, "(1+")
	after_error = _outcome(engine, "((1+2)*(3+4))")
	checks.append(("repeated evaluation is stable", len(set(first)) == 1))
	checks.append(("failed evaluation leaves no state behind", after_error == first[0]))

	failed = [name for name, ok in checks if not ok]
	for name, ok in checks:
		print(f"{name}: {'OK' if ok else 'FAIL'}")

	print("\nExpected vs Actual:")
	for label, expected, actual in expected_actual:
		status = "OK" if expected == actual else "FAIL"
		print(f"- {label}: {status}")
		print(f"  expected: {expected}")
		print(f"  actual:   {actual}")

	if failed:
		print("\nFAILED CHECKS:")
		for name in failed:
			print(f"- {name}")
		raise SystemExit(1)

	print("\nAll regression checks passed.")


if __name__ == "__main__":
	# Uso rápido:
	#   python regression_checks.py
	#   python regression_checks.py --inspect "2^3^2"
	if "--inspect" in sys.argv:
		try:
			expr = sys.argv[sys.argv.index("--inspect") + 1]
		except (ValueError, IndexError):
			raise SystemExit("Missing expression after --inspect")
		inspect_expression(expr)
	else:
		run_regressions()
