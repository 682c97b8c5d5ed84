"""Signature extraction with a structural strategy and a textual fallback."""

from typing import List, Optional, Sequence, Union

from sigtree.signatures.base_strategy import ExtractionStrategy
from sigtree.signatures.signature import Signature
from sigtree.signatures.structural import StructuralStrategy
from sigtree.signatures.textual import TextualStrategy
from sigtree.types import ExtractionMode


class SignatureExtractor:
    """Extract ordered callable signatures from JavaScript source text.

    Strategies are tried in order and the first one that handles the text wins. By
    default the syntax tree strategy runs first and the regular expression strategy
    takes over for text that does not parse. Extraction never raises: a strategy
    that fails with an exception counts as not handling the text, and when no
    strategy handles it the result is empty.

    Attributes:
        mode (ExtractionMode): Whether all declarations or only exported ones are reported.
        strategies (List[ExtractionStrategy]): Strategies in the order they are tried.

    Example:
        >>> extractor = SignatureExtractor(ExtractionMode.EXPORTED)
        >>> extractor.extract("export function add(a, b) { return a + b; }")
        [Signature(name='add', params=('a', 'b'), is_async=False, export_kind=<ExportKind.NAMED: 'named'>)]
        >>> extractor.extract("export function add(a, b) { return a +")
        [Signature(name='add', params=('a', 'b'), is_async=False, export_kind=<ExportKind.NAMED: 'named'>)]
    """

    def __init__(
        self,
        mode: Union[str, ExtractionMode] = ExtractionMode.EXPORTED,
        strategies: Optional[Sequence[ExtractionStrategy]] = None,
    ) -> None:
        """Initialize the extractor.

        Args:
            mode: ExtractionMode or its string value ("all" or "exported").
            strategies: Strategies to try in order. Defaults to the structural strategy
                followed by the textual strategy.

        Raises:
            ValueError: If mode is not a valid extraction mode.
        """
        if isinstance(mode, str):
            try:
                mode = ExtractionMode(mode.lower())
            except ValueError:
                raise ValueError(f"Invalid extraction mode: {mode}. " "Must be one of: 'all', 'exported'")
        self.mode = mode
        self.strategies: List[ExtractionStrategy] = (
            list(strategies) if strategies is not None else [StructuralStrategy(), TextualStrategy()]
        )

    def extract(self, text: str) -> List[Signature]:
        """Extract signatures from a source text.

        Args:
            text: Complete source text of one file.

        Returns:
            Signatures in source order; empty if nothing was found or no strategy could
            handle the text.
        """
        for strategy in self.strategies:
            try:
                signatures = strategy.extract(text, self.mode)
            except Exception:
                signatures = None
            if signatures is not None:
                return signatures
        return []


def extract_signatures(text: str, mode: Union[str, ExtractionMode] = ExtractionMode.EXPORTED) -> List[Signature]:
    """Extract signatures from a source text with the default strategies.

    Example:
        >>> [str(sig) for sig in extract_signatures("export default async function () {}")]
        ['export default async function()']
    """
    return SignatureExtractor(mode).extract(text)
