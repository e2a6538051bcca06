from .validator import validate_wordlists, pretty_summary
from .io import read_lines, write_lines, load_dictionary
from .filtering import filter_wordlist, filter_directory

__all__ = [
    "validate_wordlists", "pretty_summary",
    "read_lines", "write_lines", "load_dictionary",
    "filter_wordlist", "filter_directory",
]
