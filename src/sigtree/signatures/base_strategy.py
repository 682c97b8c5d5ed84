"""Extraction strategy base class defining the interface for signature recovery.

Signature extraction tries a sequence of strategies in order and keeps the result
of the first one that can handle the text. A strategy signals that it cannot handle
a text by returning None, which hands the text to the next strategy.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from sigtree.signatures.signature import Signature
from sigtree.types import ExtractionMode


class ExtractionStrategy(ABC):
    """Abstract base class for signature extraction strategies.

    Example:
        >>> class NothingStrategy(ExtractionStrategy):
        ...     def extract(self, text: str, mode: ExtractionMode) -> Optional[List[Signature]]:
        ...         return [] if not text.strip() else None
        >>> NothingStrategy().extract("", ExtractionMode.ALL)
        []
        >>> NothingStrategy().extract("function f() {}", ExtractionMode.ALL) is None
        True
    """

    @abstractmethod
    def extract(self, text: str, mode: ExtractionMode) -> Optional[List[Signature]]:
        """Recover the signatures declared in a source text.

        Args:
            text: Complete source text of one file.
            mode: Whether to report all declarations or only exported ones.

        Returns:
            Signatures in source order, or None if this strategy cannot handle the
            text and the next strategy should be tried.
        """
        pass
