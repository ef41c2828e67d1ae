"""Election file parsers for the supported ballot formats."""

from .base import ElectionParser

# Parser registry - import parsers here to register them
_parsers: list[type[ElectionParser]] = []


def register_parser(parser_class: type[ElectionParser]) -> type[ElectionParser]:
    """Decorator to register a parser class."""
    _parsers.append(parser_class)
    return parser_class


def get_all_parsers() -> list[type[ElectionParser]]:
    """Return all registered parser classes."""
    return _parsers.copy()


def detect_parser(source: str) -> ElectionParser | None:
    """Auto-detect and return an appropriate parser instance for the given source."""
    for parser_class in _parsers:
        parser = parser_class()
        if parser.can_parse(source):
            return parser
    return None


def detect_parser_by_content(content: bytes, filename: str) -> ElectionParser | None:
    """Return a parser instance that recognizes the content, or None."""
    for parser_class in _parsers:
        parser = parser_class()
        if parser.can_parse_content(content, filename):
            return parser
    return None


def get_supported_formats() -> str:
    """Return a user-friendly description of supported file formats."""
    lines = ["We currently support elections in these formats:"]
    for parser_class in _parsers:
        example = getattr(parser_class, "EXAMPLE_FILENAME", None)
        if example:
            lines.append(f"  - {parser_class.FORMAT_NAME} (e.g. {example})")
    return "\n".join(lines)
