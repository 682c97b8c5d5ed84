"""Signature extraction from a tree-sitter syntax tree."""

from typing import Any, Callable, Dict, List, Optional

import tree_sitter_javascript as tsjavascript
from tree_sitter import Language, Parser

from sigtree.signatures.base_strategy import ExtractionStrategy
from sigtree.signatures.parameters import render_parameter_nodes
from sigtree.signatures.signature import ANONYMOUS_DEFAULT_NAME, Signature
from sigtree.types import ExportKind, ExtractionMode

JS_LANGUAGE = Language(tsjavascript.language())

# "function" is the pre-0.21 grammar name of function_expression
FUNCTION_VALUE_TYPES = frozenset({"arrow_function", "function_expression", "function", "generator_function"})


def _text(node: Any) -> str:
    return node.text.decode("utf-8", errors="replace")


def _is_async(node: Any) -> bool:
    return any(child.type == "async" for child in node.children)


def _parameters(node: Any) -> Optional[Any]:
    parameters = node.child_by_field_name("parameters")
    if parameters is None:
        # Arrow function with a single bare parameter
        parameters = node.child_by_field_name("parameter")
    return parameters


def _export_kind(statement: Optional[Any]) -> ExportKind:
    if statement is None or statement.type != "export_statement":
        return ExportKind.NONE
    if any(child.type == "default" for child in statement.children):
        return ExportKind.DEFAULT
    return ExportKind.NAMED


def _method_name(node: Any) -> str:
    if node.type == "string":
        fragments = [child for child in node.named_children if child.type == "string_fragment"]
        return _text(fragments[0]) if fragments else _text(node)[1:-1]
    return _text(node)


def _signature(name: str, function: Any, export_kind: ExportKind) -> Signature:
    return Signature(
        name=name,
        params=tuple(render_parameter_nodes(_parameters(function))),
        is_async=_is_async(function),
        export_kind=export_kind,
    )


class StructuralStrategy(ExtractionStrategy):
    """Extract signatures by walking a JavaScript syntax tree.

    The text is parsed with the tree-sitter JavaScript grammar. A tree containing
    any syntax error is rejected as a whole (the strategy returns None) so that a
    partially understood file is never reported; the textual fallback handles it
    instead.

    The tree is walked in source order and each node is dispatched on its type:

    - ``function_declaration``: reported in ALL mode, or when directly exported
    - ``method_definition`` inside a class body: reported in ALL mode only
    - ``variable_declarator`` bound to an arrow or function expression: reported in
      ALL mode, or when its declaration is directly exported
    - ``export_statement`` exporting an anonymous function by default: always reported

    Example:
        >>> strategy = StructuralStrategy()
        >>> [str(sig) for sig in strategy.extract("export const load = async (url, opts = {}) => url;",
        ...                                        ExtractionMode.EXPORTED)]
        ['export async load(url, opts = ...)']
        >>> strategy.extract("function broken( {", ExtractionMode.ALL) is None
        True
    """

    def __init__(self) -> None:
        self._parser = Parser(JS_LANGUAGE)
        self._handlers: Dict[str, Callable[[Any, ExtractionMode], Optional[Signature]]] = {
            "function_declaration": self._visit_function_declaration,
            "generator_function_declaration": self._visit_function_declaration,
            "method_definition": self._visit_method_definition,
            "variable_declarator": self._visit_variable_declarator,
            "export_statement": self._visit_export_statement,
        }

    def extract(self, text: str, mode: ExtractionMode) -> Optional[List[Signature]]:
        tree = self._parser.parse(text.encode("utf-8"))
        if tree.root_node.has_error:
            return None

        signatures: List[Signature] = []
        stack = [tree.root_node]
        while stack:
            node = stack.pop()
            handler = self._handlers.get(node.type)
            if handler is not None:
                signature = handler(node, mode)
                if signature is not None:
                    signatures.append(signature)
            stack.extend(reversed(node.named_children))
        return signatures

    def _visit_function_declaration(self, node: Any, mode: ExtractionMode) -> Optional[Signature]:
        export_kind = _export_kind(node.parent)
        if mode != ExtractionMode.ALL and export_kind == ExportKind.NONE:
            return None
        name = node.child_by_field_name("name")
        return _signature(_text(name) if name is not None else ANONYMOUS_DEFAULT_NAME, node, export_kind)

    def _visit_method_definition(self, node: Any, mode: ExtractionMode) -> Optional[Signature]:
        if mode != ExtractionMode.ALL or node.parent is None or node.parent.type != "class_body":
            return None
        name = node.child_by_field_name("name")
        if name is None:
            return None
        return _signature(_method_name(name), node, ExportKind.NONE)

    def _visit_variable_declarator(self, node: Any, mode: ExtractionMode) -> Optional[Signature]:
        name = node.child_by_field_name("name")
        value = node.child_by_field_name("value")
        if name is None or name.type != "identifier" or value is None or value.type not in FUNCTION_VALUE_TYPES:
            return None
        declaration = node.parent
        export_kind = _export_kind(declaration.parent if declaration is not None else None)
        if mode != ExtractionMode.ALL and export_kind == ExportKind.NONE:
            return None
        return _signature(_text(name), value, export_kind)

    def _visit_export_statement(self, node: Any, mode: ExtractionMode) -> Optional[Signature]:
        value = node.child_by_field_name("value")
        if value is None or value.type not in FUNCTION_VALUE_TYPES or _export_kind(node) != ExportKind.DEFAULT:
            return None
        name = value.child_by_field_name("name")
        return _signature(_text(name) if name is not None else ANONYMOUS_DEFAULT_NAME, value, ExportKind.DEFAULT)
