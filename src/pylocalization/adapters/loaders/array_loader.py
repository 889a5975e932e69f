# src/pylocalization/adapters/loaders/array_loader.py
from __future__ import annotations
import ast
from pathlib import Path
from typing import Optional, Union

from pylocalization.domain.errors import LoaderError
from pylocalization.domain.types import TranslationMapping

ASSIGNMENT_NAME = "translations"


class ArrayLocalizator:
    """``array`` driver: a Python source file holding a dict literal.

    Two layouts are accepted::

        {"welcome": "Hello"}

        translations = {"welcome": "Hello"}

    The file is parsed, never executed.
    """

    def all(self, path: Union[str, Path]) -> TranslationMapping:
        p = Path(path)
        try:
            source = p.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise LoaderError(p, str(e)) from e
        try:
            tree = ast.parse(source, filename=str(p))
        except SyntaxError as e:
            raise LoaderError(p, f"line {e.lineno}: {e.msg}") from e
        except (ValueError, RecursionError, MemoryError) as e:
            raise LoaderError(p, str(e)) from e

        body = [stmt for stmt in tree.body if not _is_docstring(stmt)]
        if not body:
            return {}
        node = self._find_literal(body)
        if node is None:
            raise LoaderError(p, f"no dict literal or '{ASSIGNMENT_NAME}' assignment")
        try:
            data = ast.literal_eval(node)
        except (ValueError, TypeError, RecursionError, MemoryError) as e:
            raise LoaderError(p, str(e)) from e
        if not isinstance(data, dict):
            raise LoaderError(p, f"expected a dict literal, got {type(data).__name__}")
        return data

    @staticmethod
    def _find_literal(body: list[ast.stmt]) -> Optional[ast.expr]:
        if len(body) == 1 and isinstance(body[0], ast.Expr):
            return body[0].value
        for stmt in body:
            if isinstance(stmt, ast.Assign):
                if any(isinstance(t, ast.Name) and t.id == ASSIGNMENT_NAME for t in stmt.targets):
                    return stmt.value
            elif isinstance(stmt, ast.AnnAssign) and stmt.value is not None:
                if isinstance(stmt.target, ast.Name) and stmt.target.id == ASSIGNMENT_NAME:
                    return stmt.value
        return None


def _is_docstring(stmt: ast.stmt) -> bool:
    return isinstance(stmt, ast.Expr) and isinstance(stmt.value, ast.Constant) and isinstance(stmt.value.value, str)
