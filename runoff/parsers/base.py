"""Abstract base class for election parsers."""

from abc import ABC, abstractmethod

from runoff.models import Election


def parse_threshold(value) -> float | None:
    """Validate an optional winning threshold read from a file."""
    if value is None:
        return None
    try:
        threshold = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid threshold: {value!r}")
    if not 0 < threshold < 1:
        raise ValueError(f"Threshold must be between 0 and 1, got {threshold}")
    return threshold


class ElectionParser(ABC):
    """Abstract base class for parsing election files.

    Each parser implementation handles a specific file format. Parsers are
    registered via the @register_parser decorator in runoff/parsers/__init__.py.
    """

    FORMAT_NAME = ""
    EXAMPLE_FILENAME = ""

    @abstractmethod
    def can_parse(self, source: str) -> bool:
        """Check if this parser can handle the given source.

        Args:
            source: URL or filename to check

        Returns:
            True if this parser can handle the source, False otherwise
        """
        pass

    def can_parse_content(self, content: bytes, filename: str) -> bool:
        """Check if this parser can handle the given file content.

        Used for uploads and URLs whose name gives no hint of the format.
        Subclasses should override this to inspect file content for
        tell-tale signs of their format.

        Args:
            content: Raw bytes of the file
            filename: Original filename (may help with basic filtering)

        Returns:
            True if this parser can likely handle the content, False otherwise
        """
        return False

    @abstractmethod
    def parse(self, source: str, content: bytes) -> Election:
        """Parse the content into an Election.

        Args:
            source: Original URL or filename (for context)
            content: Raw bytes of the file content

        Returns:
            Parsed Election object

        Raises:
            ValueError: If the content cannot be parsed
        """
        pass
