from .validator import validate_wordlists, pretty_summary
from .io import read_lines, write_lines, read_words, read_frequencies

__all__ = ["validate_wordlists", "pretty_summary", "read_words", "read_frequencies"]
