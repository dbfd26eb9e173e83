from .source import WordSource, parse_line, DEFAULT_URL, DEFAULT_WORDS_FILE, DEFAULT_COUNT
from .validator import describe_source, pretty_summary

__all__ = [
    "WordSource", "parse_line", "DEFAULT_URL", "DEFAULT_WORDS_FILE", "DEFAULT_COUNT",
    "describe_source", "pretty_summary",
]
