"""
Load shell syntax trees from JSON documents.

A document is a tree of JSON objects, each naming its node kind under
`"Type"` and its fields under CamelCase keys (`ThenStmts`, `BashStyle`,
`With`). `"Type"` may be left out where a field can only hold one kind of
node, e.g. the `Word` of a `Redir`. Tokens are written by their spelling
(`">>"`, `"$'"`). Keys the node does not define, such as source positions,
are ignored.
"""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional, Union, get_args, get_origin, get_type_hints

import syntax
from syntax import Token

_NoneType = type(None)

NODE_TYPES: Dict[str, type] = {
    name: obj
    for name, obj in vars(syntax).items()
    if isinstance(obj, type) and dataclasses.is_dataclass(obj)
}

# clauses that only print as part of their enclosing if or case
_CLAUSE_TYPES = {"Elif", "PatternList"}

ROOT_TYPES: Dict[str, type] = {
    name: cls for name, cls in NODE_TYPES.items() if name not in _CLAUSE_TYPES
}


class LoadError(ValueError):
    """Raised when a JSON document does not describe a syntax tree."""

    def __init__(self, message: str, path: Optional[str] = None):
        loc = f" (at {path})" if path else ""
        super().__init__(f"{message}{loc}")
        self.path = path


@dataclass(frozen=True)
class LoadResult:
    """Decoded root node plus the name of the document it came from."""

    ast: Any
    source_name: str


def _json_key(field_name: str) -> str:
    return "".join(part.capitalize() for part in field_name.split("_"))


@lru_cache(maxsize=None)
def _field_hints(cls: type) -> Dict[str, Any]:
    return get_type_hints(cls)


def _decode(value: Any, hint: Any, path: str) -> Any:
    origin = get_origin(hint)
    if origin is Union:
        options = [arg for arg in get_args(hint) if arg is not _NoneType]
        if value is None:
            if len(options) < len(get_args(hint)):
                return None
            raise LoadError("Expected a node, got null", path)
        if len(options) == 1:
            return _decode(value, options[0], path)
        return _decode_variant(value, options, path)
    if value is None:
        raise LoadError("Expected a value, got null", path)
    if origin is list:
        if not isinstance(value, list):
            raise LoadError(f"Expected a list, got {type(value).__name__}", path)
        (item_hint,) = get_args(hint)
        return [_decode(item, item_hint, f"{path}[{i}]") for i, item in enumerate(value)]
    if hint is bool:
        if not isinstance(value, bool):
            raise LoadError(f"Expected a boolean, got {type(value).__name__}", path)
        return value
    if hint is str:
        if not isinstance(value, str):
            raise LoadError(f"Expected a string, got {type(value).__name__}", path)
        return value
    if hint is Token:
        try:
            return Token(value)
        except (TypeError, ValueError):
            raise LoadError(f"Unknown token: {value!r}", path) from None
    if dataclasses.is_dataclass(hint):
        return _decode_node(value, hint, path)
    raise LoadError(f"Cannot decode field of type {hint!r}", path)


def _decode_variant(value: Any, options: List[type], path: str) -> Any:
    if not isinstance(value, dict):
        raise LoadError(f"Expected an object, got {type(value).__name__}", path)
    type_name = value.get("Type")
    for cls in options:
        if cls.__name__ == type_name:
            return _decode_node(value, cls, path)
    allowed = ", ".join(cls.__name__ for cls in options)
    raise LoadError(f"Expected one of {allowed}; got Type {type_name!r}", path)


def _decode_node(value: Any, cls: type, path: str) -> Any:
    if not isinstance(value, dict):
        raise LoadError(f"Expected an object, got {type(value).__name__}", path)
    type_name = value.get("Type", cls.__name__)
    if type_name != cls.__name__:
        raise LoadError(f"Expected {cls.__name__}, got Type {type_name!r}", path)

    hints = _field_hints(cls)
    kwargs: Dict[str, Any] = {}
    for fld in dataclasses.fields(cls):
        key = _json_key(fld.name)
        if key in value:
            kwargs[fld.name] = _decode(value[key], hints[fld.name], f"{path}.{key}")
        elif fld.default is dataclasses.MISSING and fld.default_factory is dataclasses.MISSING:
            raise LoadError(f"{cls.__name__} is missing required field {key!r}", path)
    return cls(**kwargs)


def load_tree(document: Any, *, source_name: str = "<input>") -> LoadResult:
    """
    Decode an already-parsed JSON value into a syntax tree.

    The root may be any node kind except the `Elif` and `PatternList` clauses,
    and must carry a `"Type"` key.

    Raises:
        LoadError: If the document does not describe a well-typed tree.
    """
    if not isinstance(document, dict):
        raise LoadError(f"Expected an object, got {type(document).__name__}", "$")
    type_name = document.get("Type")
    cls = ROOT_TYPES.get(type_name) if isinstance(type_name, str) else None
    if cls is None:
        raise LoadError(f"Unknown node Type {type_name!r}", "$")
    return LoadResult(ast=_decode_node(document, cls, "$"), source_name=source_name)


def load_json(source: str, *, source_name: str = "<input>") -> LoadResult:
    """
    Parse JSON text and decode it into a syntax tree.

    Args:
        source: Raw JSON text.
        source_name: Label carried on the result, e.g. the file path.

    Raises:
        LoadError: If the text is not valid JSON or not a well-typed tree.
    """
    try:
        document = json.loads(source)
    except json.JSONDecodeError as exc:
        raise LoadError(
            f"Invalid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})"
        ) from exc
    return load_tree(document, source_name=source_name)


def load_file(path: Union[str, Path]) -> LoadResult:
    """Read a UTF-8 JSON file and decode it; `OSError` propagates."""
    source_path = Path(path)
    source = source_path.read_text(encoding="utf-8")
    return load_json(source, source_name=str(source_path))


__all__ = ["LoadError", "LoadResult", "NODE_TYPES", "ROOT_TYPES", "load_file", "load_json", "load_tree"]
