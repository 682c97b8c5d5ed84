"""Signature extraction from raw source text.

This strategy is the fallback for files the syntax tree strategy rejects. It works
on the text with a few regular expressions and always produces a result, possibly
empty. Matches are only accepted at a statement start (beginning of a line, right
after ``;``, ``{`` or ``}``, or right after a ``*/`` comment end) which keeps
function expressions nested in calls or assignments from being reported as
declarations. Parameter lists are delimited by bracket matching, so defaults that
contain calls or literals do not cut them short.
"""

import re
from typing import Dict, List, Optional, Tuple

from sigtree.signatures.base_strategy import ExtractionStrategy
from sigtree.signatures.parameters import is_identifier, matching_close, render_parameter_list
from sigtree.signatures.signature import ANONYMOUS_DEFAULT_NAME, Signature
from sigtree.types import ExportKind, ExtractionMode

_STATEMENT_START = r"(?:^|(?<=[;{}])|(?<=\*/))[ \t]*"

FUNCTION_RE = re.compile(
    _STATEMENT_START + r"(?P<export>export\s+(?P<default>default\s+)?)?"
    r"(?P<async>async\s+)?"
    r"function\b\s*\*?\s*(?P<name>[\w$]*)\s*(?P<open>\()",
    re.MULTILINE,
)

VARIABLE_RE = re.compile(
    _STATEMENT_START + r"(?P<export>export\s+)?(?:const|let|var)\s+(?P<name>[\w$]+)\s*=\s*"
    r"(?P<async>async\s+)?"
    r"(?:function\b\s*\*?\s*[\w$]*\s*(?P<function_open>\()"
    r"|(?P<arrow_open>\()"
    r"|(?P<bare_param>[\w$]+)\s*=>)",
    re.MULTILINE,
)

EXPORT_LIST_RE = re.compile(r"export\s*\{\s*(?P<names>[^}]+)\s*\}")
_ARROW_RE = re.compile(r"\s*=>")
_ALIAS_RE = re.compile(r"\s+as\s+")
_OPEN_GROUPS = ("open", "function_open", "arrow_open")


def _export_kind(match: re.Match[str]) -> ExportKind:
    if not match.group("export"):
        return ExportKind.NONE
    if match.groupdict().get("default"):
        return ExportKind.DEFAULT
    return ExportKind.NAMED


def _parameter_text(text: str, match: re.Match[str]) -> Optional[str]:
    """Get the parameter list of a match, or None if the match is not a function."""
    groups = match.groupdict()
    if groups.get("bare_param") is not None:
        return groups["bare_param"]
    for group in _OPEN_GROUPS:
        if groups.get(group) is None:
            continue
        open_index = match.start(group)
        close_index = matching_close(text, open_index)
        if close_index < 0:
            return None
        # A parenthesized initializer is only a function when an arrow follows
        if group == "arrow_open" and not _ARROW_RE.match(text, close_index + 1):
            return None
        return text[open_index + 1 : close_index]
    return None


def _signature(match: re.Match[str], parameters: str, export_kind: ExportKind) -> Optional[Signature]:
    name = match.group("name")
    if not name:
        if export_kind != ExportKind.DEFAULT:
            return None
        name = ANONYMOUS_DEFAULT_NAME
    return Signature(
        name=name,
        params=tuple(render_parameter_list(parameters)),
        is_async=bool(match.group("async")),
        export_kind=export_kind,
    )


def _exported_names(names: str) -> List[str]:
    local_names = []
    for entry in names.split(","):
        entry = entry.strip()
        if entry:
            local_names.append(_ALIAS_RE.split(entry)[0].strip())
    return local_names


class TextualStrategy(ExtractionStrategy):
    """Extract signatures from raw text with regular expressions.

    Function declarations and function-valued ``const``/``let``/``var`` bindings are
    found by pattern, with their ``export``, ``export default`` and ``async``
    markers. In EXPORTED mode, export lists such as ``export { a, b as c }`` are
    resolved by looking up the first declaration of each local name anywhere in the
    text; names without a matching declaration are skipped.

    Example:
        >>> source = "const helper = (x) => x;\\nexport function run(a = f(1), ...rest) {\\n"
        >>> [str(sig) for sig in TextualStrategy().extract(source, ExtractionMode.ALL)]
        ['helper(x)', 'export run(a = ..., ...rest)']
        >>> [str(sig) for sig in TextualStrategy().extract(source, ExtractionMode.EXPORTED)]
        ['export run(a = ..., ...rest)']
    """

    def extract(self, text: str, mode: ExtractionMode) -> Optional[List[Signature]]:
        found: List[Tuple[int, Signature]] = []
        first_declarations: Dict[str, Tuple[int, re.Match[str], str]] = {}

        for pattern in (FUNCTION_RE, VARIABLE_RE):
            for match in pattern.finditer(text):
                parameters = _parameter_text(text, match)
                if parameters is None:
                    continue

                name = match.group("name")
                if name and (name not in first_declarations or match.start() < first_declarations[name][0]):
                    first_declarations[name] = (match.start(), match, parameters)

                export_kind = _export_kind(match)
                if mode != ExtractionMode.ALL and export_kind == ExportKind.NONE:
                    continue
                signature = _signature(match, parameters, export_kind)
                if signature is not None:
                    found.append((match.start("name"), signature))

        if mode == ExtractionMode.EXPORTED:
            for export_list in EXPORT_LIST_RE.finditer(text):
                for name in _exported_names(export_list.group("names")):
                    if not is_identifier(name) or name not in first_declarations:
                        continue
                    _, match, parameters = first_declarations[name]
                    signature = _signature(match, parameters, ExportKind.NAMED)
                    if signature is not None:
                        found.append((export_list.start(), signature))

        found.sort(key=lambda item: item[0])
        return [signature for _, signature in found]
