"""Rendering of formal parameters.

Both extraction strategies render parameters through this module so that a
signature looks the same whether it was recovered from a syntax tree or from raw
text:

* a plain identifier renders as its name;
* a parameter with a default value renders as ``name = ...``;
* a rest parameter renders as ``...name``;
* an object pattern renders as ``{a, b}`` (top-level property names only, ``?``
  for keys that are not plain identifiers) or ``{...}`` when empty;
* an array pattern renders as ``[...]``;
* anything else renders as ``?``.
"""

import re
from typing import Any, Iterable, List, Optional

UNKNOWN = "?"
ARRAY_PATTERN = "[...]"
EMPTY_OBJECT_PATTERN = "{...}"

_IDENTIFIER_RE = re.compile(r"^(?:[^\W\d]|\$)(?:\w|\$)*$")
_OPENERS = "([{"
_CLOSERS = ")]}"
_QUOTES = "'\"`"


def with_default(rendered: str) -> str:
    return f"{rendered} = ..."


def rest(rendered: str) -> str:
    return f"...{rendered}"


def object_pattern(keys: Iterable[str]) -> str:
    keys = list(keys)
    if not keys:
        return EMPTY_OBJECT_PATTERN
    return "{" + ", ".join(keys) + "}"


def is_identifier(text: str) -> bool:
    """Check whether text is a plain JavaScript identifier.

    Example:
        >>> is_identifier("$el"), is_identifier("_private"), is_identifier("2fast")
        (True, True, False)
    """
    return bool(_IDENTIFIER_RE.match(text))


# Syntax tree form


def _node_text(node: Any) -> str:
    return node.text.decode("utf-8", errors="replace")


def _property_key(node: Any) -> str:
    if node.type == "shorthand_property_identifier_pattern":
        return _node_text(node)
    if node.type == "pair_pattern":
        key = node.child_by_field_name("key")
        if key is not None and key.type == "property_identifier":
            return _node_text(key)
    elif node.type == "object_assignment_pattern":
        left = node.child_by_field_name("left")
        if left is not None and left.type == "shorthand_property_identifier_pattern":
            return _node_text(left)
    return UNKNOWN


def render_parameter_node(node: Any) -> str:
    """Render one parameter node of a tree-sitter syntax tree.

    Args:
        node: A named child of a ``formal_parameters`` node, or the bare identifier
            of a single-parameter arrow function.

    Returns:
        The rendered parameter.
    """
    if node.type in ("identifier", "undefined"):
        return _node_text(node)
    if node.type == "assignment_pattern":
        left = node.child_by_field_name("left")
        return with_default(render_parameter_node(left) if left is not None else UNKNOWN)
    if node.type == "rest_pattern":
        inner = [child for child in node.named_children if child.type != "comment"]
        return rest(render_parameter_node(inner[0]) if inner else UNKNOWN)
    if node.type == "object_pattern":
        return object_pattern(_property_key(child) for child in node.named_children if child.type != "comment")
    if node.type == "array_pattern":
        return ARRAY_PATTERN
    return UNKNOWN


def render_parameter_nodes(parameters: Optional[Any]) -> List[str]:
    """Render the parameters of a function-like node.

    Args:
        parameters: A ``formal_parameters`` node, a bare ``identifier`` (arrow
            function with a single unparenthesized parameter), or None.

    Returns:
        Rendered parameters in declaration order.
    """
    if parameters is None:
        return []
    if parameters.type != "formal_parameters":
        return [render_parameter_node(parameters)]
    return [render_parameter_node(child) for child in parameters.named_children if child.type != "comment"]


# Raw text form


def split_top_level(text: str, separator: str = ",") -> List[str]:
    """Split text at separators that are not nested in brackets or strings.

    Example:
        >>> split_top_level("a, {b, c}, d = f(1, 2)")
        ['a', ' {b, c}', ' d = f(1, 2)']
    """
    parts: List[str] = []
    depth = 0
    quote: Optional[str] = None
    start = 0
    for index, char in enumerate(text):
        if quote is not None:
            if char == quote and text[index - 1] != "\\":
                quote = None
        elif char in _QUOTES:
            quote = char
        elif char in _OPENERS:
            depth += 1
        elif char in _CLOSERS:
            depth = max(depth - 1, 0)
        elif char == separator and depth == 0:
            parts.append(text[start:index])
            start = index + 1
    parts.append(text[start:])
    return parts


def matching_close(text: str, open_index: int) -> int:
    """Find the bracket closing the one at open_index, skipping nested brackets and strings.

    Returns:
        Index of the closing bracket, or -1 if the text ends first.

    Example:
        >>> matching_close("f(a = g(1), b) {}", 1)
        13
        >>> matching_close("f(a, b", 1)
        -1
    """
    depth = 0
    quote: Optional[str] = None
    for index in range(open_index, len(text)):
        char = text[index]
        if quote is not None:
            if char == quote and text[index - 1] != "\\":
                quote = None
        elif char in _QUOTES:
            quote = char
        elif char in _OPENERS:
            depth += 1
        elif char in _CLOSERS:
            depth -= 1
            if depth == 0:
                return index
    return -1


def _find_top_level(text: str, target: str) -> int:
    head = split_top_level(text, target)[0]
    return len(head) if len(head) < len(text) else -1


def _text_property_key(text: str) -> str:
    text = text.strip()
    if text.startswith("..."):
        return UNKNOWN
    colon = _find_top_level(text, ":")
    if colon >= 0:
        key = text[:colon].strip()
    else:
        equals = _find_top_level(text, "=")
        key = text[:equals].strip() if equals >= 0 else text
    return key if is_identifier(key) else UNKNOWN


def render_parameter_text(text: str) -> str:
    """Render one parameter given as source text.

    Example:
        >>> render_parameter_text("options = { retries: 3 }")
        'options = ...'
        >>> render_parameter_text("{ id, name: label, ...rest }")
        '{id, name, ?}'
        >>> render_parameter_text("...args")
        '...args'
    """
    text = text.strip()
    if text.startswith("..."):
        return rest(render_parameter_text(text[3:]))
    equals = _find_top_level(text, "=")
    if equals >= 0:
        return with_default(render_parameter_text(text[:equals]))
    if text.startswith("{"):
        inner = text[1:-1] if text.endswith("}") else text[1:]
        return object_pattern(_text_property_key(part) for part in split_top_level(inner) if part.strip())
    if text.startswith("["):
        return ARRAY_PATTERN
    if is_identifier(text):
        return text
    return UNKNOWN


def render_parameter_list(text: str) -> List[str]:
    """Render a comma-separated parameter list given as source text.

    Example:
        >>> render_parameter_list("a, b = 2, [x, y],")
        ['a', 'b = ...', '[...]']
        >>> render_parameter_list("")
        []
    """
    return [render_parameter_text(part) for part in split_top_level(text) if part.strip()]
