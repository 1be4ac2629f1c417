"""Pure expression logic (Qt-free).

Author: Michael Economou
Date: 2026-10-14

Evaluate a Python expression per file to build its new name. The
expression sees the file name parts, the index, the date and media
fields, plus a few helpers:

    padnum(num, length)   zero-padded number
    upper(text), lower(text)
    substr(text, start, length=None)
    format_time(seconds)  HH:MM:SS
    cond(condition, if_true, if_false)
    str(value), int(value), len(text)

Expressions are parsed with ``ast`` and walked node by node. Only
literals, context names, arithmetic, comparisons, boolean operators,
conditional expressions, string slicing and calls to the helpers above
are accepted. Attribute access is rejected. Text results are capped at
EXPRESSION_MAX_TEXT_LENGTH characters and powers at
EXPRESSION_MAX_POWER_BITS bits.
"""

import ast
import operator
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from namecraft.models.file_item import FileItem

from namecraft.config import (
    DEFAULT_EXPRESSION,
    EXPRESSION_MAX_POWER_BITS,
    EXPRESSION_MAX_TEXT_LENGTH,
)
from namecraft.models.media_info import MediaInfo, media_info_for
from namecraft.utils.date_formatter import format_time
from namecraft.utils.filesystem.file_utils import split_file_name
from namecraft.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class ExpressionError(ValueError):
    """Raised when an expression cannot be compiled or evaluated."""


def padnum(num: Any, length: int) -> str:
    length = int(length)
    if length > EXPRESSION_MAX_TEXT_LENGTH:
        raise ExpressionError(f"padnum length {length} is too large")
    return str(num).rjust(length, "0")


def substr(text: str, start: int, length: int | None = None) -> str:
    text = str(text)
    if length is None:
        return text[start:]
    return text[start:][: max(0, length)]


def cond(condition: Any, if_true: Any, if_false: Any) -> Any:
    return if_true if condition else if_false


HELPERS: dict[str, Callable[..., Any]] = {
    "padnum": padnum,
    "upper": lambda text: str(text).upper(),
    "lower": lambda text: str(text).lower(),
    "substr": substr,
    "format_time": format_time,
    "cond": cond,
    "str": str,
    "int": int,
    "len": len,
}

BINARY_OPERATORS: dict[type[ast.operator], Callable[[Any, Any], Any]] = {
    ast.Add: operator.add,
    ast.Sub: operator.sub,
    ast.Mult: operator.mul,
    ast.Div: operator.truediv,
    ast.FloorDiv: operator.floordiv,
    ast.Mod: operator.mod,
    ast.Pow: operator.pow,
}

UNARY_OPERATORS: dict[type[ast.unaryop], Callable[[Any], Any]] = {
    ast.UAdd: operator.pos,
    ast.USub: operator.neg,
    ast.Not: operator.not_,
}

COMPARE_OPERATORS: dict[type[ast.cmpop], Callable[[Any, Any], Any]] = {
    ast.Eq: operator.eq,
    ast.NotEq: operator.ne,
    ast.Lt: operator.lt,
    ast.LtE: operator.le,
    ast.Gt: operator.gt,
    ast.GtE: operator.ge,
    ast.In: lambda left, right: operator.contains(right, left),
    ast.NotIn: lambda left, right: not operator.contains(right, left),
}


def build_context(
    file_item: "FileItem", index: int, media: MediaInfo, date: str
) -> dict[str, Any]:
    base_name, extension = split_file_name(file_item.filename)
    return {
        "name": base_name,
        "fileext": extension.lstrip("."),
        "fullname": file_item.filename,
        "path": file_item.full_path,
        "index": index,
        "date": date,
        "width": media.width,
        "height": media.height,
        "duration": media.duration,
        "frames": media.frames,
        "is_image": media.is_image,
        "is_video": media.is_video,
        "colorspace": media.colorspace,
        "log": media.color_transfer,
        "codec": media.codec,
        "bit_depth": media.bit_depth,
        "chroma_subsampling": media.chroma_subsampling,
        "scan_type": media.scan_type,
        "bitrate": media.bitrate,
        "pixel_format": media.pixel_format,
    }


def _text_length(value: Any) -> int:
    return len(value) if isinstance(value, str) else 0


def _check_text(value: Any) -> Any:
    if _text_length(value) > EXPRESSION_MAX_TEXT_LENGTH:
        raise ExpressionError(f"Text longer than {EXPRESSION_MAX_TEXT_LENGTH} characters")
    return value


def _check_binary(op: ast.operator, left: Any, right: Any) -> None:
    """Reject operations whose result would exceed the limits before running them."""
    if isinstance(op, ast.Mult):
        text, count = (left, right) if isinstance(left, str) else (right, left)
        if isinstance(text, str) and isinstance(count, int):
            if len(text) * max(count, 0) > EXPRESSION_MAX_TEXT_LENGTH:
                raise ExpressionError(
                    f"Text longer than {EXPRESSION_MAX_TEXT_LENGTH} characters"
                )
    elif isinstance(op, ast.Mod) and isinstance(left, str):
        raise ExpressionError("Text formatting with '%' is not allowed")
    elif isinstance(op, ast.Pow) and isinstance(left, int) and isinstance(right, int):
        bits = max(abs(left).bit_length(), 1) * abs(right)
        if bits > EXPRESSION_MAX_POWER_BITS:
            raise ExpressionError(f"Power exceeds {EXPRESSION_MAX_POWER_BITS} bits")


class ExpressionEvaluator(ast.NodeVisitor):
    """Evaluate a parsed expression tree against a context of names."""

    def __init__(self, context: dict[str, Any]):
        self.context = context

    def generic_visit(self, node: ast.AST) -> Any:
        raise ExpressionError(f"'{type(node).__name__}' is not allowed in expressions")

    def visit_Expression(self, node: ast.Expression) -> Any:
        return self.visit(node.body)

    def visit_Constant(self, node: ast.Constant) -> Any:
        if not isinstance(node.value, str | int | float | bool | None):
            raise ExpressionError(f"Unsupported literal {node.value!r}")
        return _check_text(node.value)

    def visit_Name(self, node: ast.Name) -> Any:
        if node.id not in self.context:
            raise ExpressionError(f"Unknown name '{node.id}'")
        return self.context[node.id]

    def visit_BinOp(self, node: ast.BinOp) -> Any:
        handler = BINARY_OPERATORS.get(type(node.op))
        if handler is None:
            raise ExpressionError(f"Operator '{type(node.op).__name__}' is not allowed")
        left = self.visit(node.left)
        right = self.visit(node.right)
        _check_binary(node.op, left, right)
        return _check_text(handler(left, right))

    def visit_UnaryOp(self, node: ast.UnaryOp) -> Any:
        handler = UNARY_OPERATORS.get(type(node.op))
        if handler is None:
            raise ExpressionError(f"Operator '{type(node.op).__name__}' is not allowed")
        return handler(self.visit(node.operand))

    def visit_BoolOp(self, node: ast.BoolOp) -> Any:
        result = None
        for value_node in node.values:
            result = self.visit(value_node)
            # Short-circuit like Python: 'and' stops on falsy, 'or' on truthy
            if isinstance(node.op, ast.And) != bool(result):
                return result
        return result

    def visit_Compare(self, node: ast.Compare) -> bool:
        left = self.visit(node.left)
        for op, comparator in zip(node.ops, node.comparators, strict=True):
            handler = COMPARE_OPERATORS.get(type(op))
            if handler is None:
                raise ExpressionError(f"Comparison '{type(op).__name__}' is not allowed")
            right = self.visit(comparator)
            if not handler(left, right):
                return False
            left = right
        return True

    def visit_IfExp(self, node: ast.IfExp) -> Any:
        if self.visit(node.test):
            return self.visit(node.body)
        return self.visit(node.orelse)

    def visit_Call(self, node: ast.Call) -> Any:
        if not isinstance(node.func, ast.Name) or node.func.id not in HELPERS:
            raise ExpressionError("Only helper functions can be called")
        if node.keywords or any(isinstance(arg, ast.Starred) for arg in node.args):
            raise ExpressionError("Helper functions take positional arguments only")
        args = [self.visit(arg) for arg in node.args]
        return _check_text(HELPERS[node.func.id](*args))

    def visit_Subscript(self, node: ast.Subscript) -> Any:
        value = self.visit(node.value)
        if not isinstance(value, str):
            raise ExpressionError("Only text can be indexed or sliced")
        if isinstance(node.slice, ast.Slice):
            bounds = [
                None if part is None else self.visit(part)
                for part in (node.slice.lower, node.slice.upper, node.slice.step)
            ]
            return value[slice(*bounds)]
        return value[self.visit(node.slice)]


def evaluate_expression(expression: str, context: dict[str, Any]) -> str:
    """Evaluate ``expression`` against ``context`` and return the result as text.

    Raises:
        ExpressionError: On syntax errors, disallowed syntax, exceeded
            limits, or any error raised while evaluating.

    """
    if len(expression) > EXPRESSION_MAX_TEXT_LENGTH:
        raise ExpressionError(f"Expression longer than {EXPRESSION_MAX_TEXT_LENGTH} characters")
    try:
        tree = ast.parse(expression, mode="eval")
        result = ExpressionEvaluator(context).visit(tree)
    except ExpressionError:
        raise
    except (SyntaxError, ArithmeticError, LookupError, TypeError, ValueError, RecursionError) as e:
        raise ExpressionError(f"{type(e).__name__}: {e}") from e
    return "" if result is None else str(result)



class ExpressionLogic:
    """Rename files with a per-file Python expression."""

    @staticmethod
    def apply_from_data(
        data: dict[str, Any],
        file_item: "FileItem",
        index: int = 0,
        metadata_cache: dict | None = None,
    ) -> str:
        """Evaluate ``data["expression"]``; any error returns the original name."""
        expression = data.get("expression") or DEFAULT_EXPRESSION
        _, extension = split_file_name(file_item.filename)

        date = data.get("date") or datetime.now()
        media = media_info_for(file_item.full_path, metadata_cache)
        context = build_context(file_item, index, media, date.strftime("%Y-%m-%d"))

        try:
            result = evaluate_expression(expression, context)
        except ExpressionError as e:
            logger.warning(
                "[ExpressionLogic] Expression error for '%s': %s", file_item.filename, e
            )
            return file_item.filename

        if extension and extension not in result:
            result += extension
        return result

    @staticmethod
    def is_effective_data(data: dict[str, Any]) -> bool:
        return bool((data.get("expression") or DEFAULT_EXPRESSION).strip())
