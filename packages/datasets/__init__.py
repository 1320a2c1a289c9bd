from .validator import validate_wordlist, pretty_summary
from .io import read_lines, read_words, write_lines, unique_preserve_order
from .start_words import DEFAULT_ROOT, START_WORDS_PATH, WordListError, load_word_list, pick_root

__all__ = [
    "validate_wordlist",
    "pretty_summary",
    "read_lines",
    "read_words",
    "write_lines",
    "unique_preserve_order",
    "DEFAULT_ROOT",
    "START_WORDS_PATH",
    "WordListError",
    "load_word_list",
    "pick_root",
]
