from .validator import validate_wordlists, pretty_summary
from .io import read_lines, read_words, unique_preserve_order, write_lines
from .roots import DEFAULT_ROOT_WORD, RootWordSource

__all__ = [
    "DEFAULT_ROOT_WORD", "RootWordSource", "pretty_summary", "read_lines", "read_words",
    "unique_preserve_order", "validate_wordlists", "write_lines",
]
