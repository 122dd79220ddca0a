"""Safe transforms over parsed data.

A transform is a single Python expression over the name ``data``, for example
``[u["name"] for u in data["users"] if u["active"]]``. The expression is
parsed and checked against a whitelist of syntax, builtins and read-only
methods before it is evaluated, so it can project and reshape data but cannot
import modules, reach attributes, or define functions.
"""

import ast
import logging
from collections.abc import ItemsView, Iterator, KeysView, ValuesView
from typing import Any

from json_workbench.errors import TransformError

logger = logging.getLogger(__name__)

MAX_EXPRESSION_LENGTH = 10_000

SAFE_BUILTINS = {
    "len": len,
    "sorted": sorted,
    "sum": sum,
    "min": min,
    "max": max,
    "abs": abs,
    "round": round,
    "list": list,
    "dict": dict,
    "set": set,
    "tuple": tuple,
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
    "any": any,
    "all": all,
    "enumerate": enumerate,
    "zip": zip,
    "range": range,
    "reversed": reversed,
}

SAFE_METHODS = frozenset({
    "get", "keys", "values", "items",
    "upper", "lower", "strip", "split", "join",
    "startswith", "endswith", "replace", "count", "index",
})

ALLOWED_NODES = (
    ast.Expression,
    ast.Constant,
    ast.Name,
    ast.Load,
    ast.Store,
    ast.Subscript,
    ast.Slice,
    ast.List,
    ast.Tuple,
    ast.Dict,
    ast.Set,
    ast.BinOp,
    ast.UnaryOp,
    ast.BoolOp,
    ast.Compare,
    ast.IfExp,
    ast.ListComp,
    ast.SetComp,
    ast.DictComp,
    ast.GeneratorExp,
    ast.comprehension,
    ast.Call,
    ast.keyword,
    ast.Attribute,
    ast.Starred,
    ast.operator,
    ast.unaryop,
    ast.boolop,
    ast.cmpop,
)

# Exponentiation can be used to build arbitrarily large integers
BLOCKED_OPERATORS = (ast.Pow,)


class _ExpressionValidator(ast.NodeVisitor):
    """Rejects any syntax outside the transform whitelist."""

    def __init__(self, bound_names: set[str]):
        self._bound_names = {"data"} | bound_names

    def generic_visit(self, node: ast.AST) -> None:
        if not isinstance(node, ALLOWED_NODES) or isinstance(node, BLOCKED_OPERATORS):
            raise TransformError(f"'{type(node).__name__}' is not allowed in transforms")
        super().generic_visit(node)

    def visit_Name(self, node: ast.Name) -> None:
        if node.id.startswith("_"):
            raise TransformError(f"Name '{node.id}' is not allowed")
        if isinstance(node.ctx, ast.Load) and node.id not in self._bound_names and node.id not in SAFE_BUILTINS:
            raise TransformError(f"Unknown name '{node.id}'")

    def visit_Attribute(self, node: ast.Attribute) -> None:
        if node.attr not in SAFE_METHODS:
            raise TransformError(f"Attribute '{node.attr}' is not allowed")
        self.generic_visit(node)

    def visit_Call(self, node: ast.Call) -> None:
        func = node.func
        if isinstance(func, ast.Name):
            if func.id not in SAFE_BUILTINS:
                raise TransformError(f"Function '{func.id}' is not allowed")
        elif not isinstance(func, ast.Attribute):
            raise TransformError("Only builtin functions and whitelisted methods may be called")
        self.generic_visit(node)


def _comprehension_names(tree: ast.AST) -> set[str]:
    names = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.comprehension):
            names.update(n.id for n in ast.walk(node.target) if isinstance(n, ast.Name))
    return names


def _normalize(code: str) -> str:
    expression = code.strip()
    if expression.startswith("return "):
        expression = expression[len("return "):]
    return expression.rstrip(";").strip()


def compile_transform(code: str) -> Any:
    """Validate and compile a transform expression.

    Raises:
        TransformError: If the expression is malformed or uses forbidden syntax
    """
    expression = _normalize(code)
    if len(expression) > MAX_EXPRESSION_LENGTH:
        raise TransformError("Expression is too long")

    try:
        tree = ast.parse(expression, mode="eval")
    except SyntaxError as e:
        raise TransformError(f"Invalid expression: {e.msg}") from e

    _ExpressionValidator(_comprehension_names(tree)).visit(tree)
    return compile(tree, "<transform>", "eval")


def evaluate_transform(data: Any, code: str) -> Any:
    """Evaluate a transform expression, raising on failure.

    Raises:
        TransformError: If the expression is rejected or fails to evaluate
    """
    compiled = compile_transform(code)
    try:
        return eval(compiled, {"__builtins__": {}, **SAFE_BUILTINS, "data": data})
    except Exception as e:
        raise TransformError(f"{type(e).__name__}: {e}") from e


def run_transform(data: Any, code: str) -> Any:
    """Apply a transform expression to ``data``.

    Blank code returns the data unchanged. Any failure returns an
    error-shaped value ``{"error": "Transformation Error: ..."}``.
    """
    if not code.strip():
        return data

    try:
        result = evaluate_transform(data, code)
    except TransformError as e:
        logger.warning("Transform failed: %s", e)
        return {"error": f"Transformation Error: {e}"}

    # Generators, ranges and other lazy results are materialized for rendering
    if isinstance(result, (tuple, set, frozenset, range, KeysView, ValuesView, ItemsView, Iterator)):
        return list(result)
    return result
