"""
text_match.py - Text Matching Tools

Criterion matching (literal term or regular expression) and new-name
computation for a single file name
"""

from typing import Optional, Union
import re

from .errors import ConfigurationError


def file_extension(name: str) -> str:
    """
    Extension of a file name, starting at the last dot

    "a.tar.gz" -> ".gz", "README" -> "", ".bashrc" -> ".bashrc"
    """
    idx = name.rfind('.')
    if idx < 0:
        return ""
    return name[idx:]


def split_extension(name: str) -> tuple[str, str]:
    """Split a name into (stem, extension) using file_extension()"""
    ext = file_extension(name)
    return name[:len(name) - len(ext)], ext


class LiteralMatcher:
    """Plain substring mode: the search term itself is the match"""

    is_regex = False

    def __init__(self, term: str):
        self.term = term

    def match(self, file_name: str) -> str:
        return self.term

    def __repr__(self) -> str:
        return f"LiteralMatcher({self.term!r})"


class PatternMatcher:
    """Regex mode: the first substring of the name matching the pattern"""

    is_regex = True

    def __init__(self, pattern: re.Pattern[str]):
        self.pattern = pattern

    def match(self, file_name: str) -> str:
        m = self.pattern.search(file_name)
        return m.group(0) if m else ""

    def __repr__(self) -> str:
        return f"PatternMatcher({self.pattern.pattern!r})"


Matcher = Union[LiteralMatcher, PatternMatcher]


def make_matcher(term: str, regex: bool = False) -> Matcher:
    """
    Build the matcher for a search term

    Args:
        term: Search term, or a regular expression when regex is set
        regex: Whether to compile term as a pattern

    Raises:
        ConfigurationError: The pattern does not compile
    """
    if not regex:
        return LiteralMatcher(term)
    try:
        return PatternMatcher(re.compile(term))
    except re.error as e:
        raise ConfigurationError(f"invalid pattern {term!r}: {e}") from e


def search_string(pattern: Optional[re.Pattern[str]], term: str, file_name: str) -> str:
    """
    Substring of file_name to be replaced

    Without a pattern the term is returned as-is; with one, the first match
    in file_name or "" when nothing matches.
    """
    if pattern is None:
        return LiteralMatcher(term).match(file_name)
    return PatternMatcher(pattern).match(file_name)


def passes_extension_filter(file_name: str, extension_filter: str) -> bool:
    """
    Extension gate

    Names without an extension always pass so that extensionless files are
    still considered when a filter is set.
    """
    if not extension_filter:
        return True
    ext = file_extension(file_name)
    return not ext or ext == extension_filter


def plan_new_name(
    file_name: str,
    extension_filter: str,
    matched: str,
    replacement: str
) -> Optional[str]:
    """
    Candidate new name for one file

    Args:
        file_name: Current base name
        extension_filter: Extension filter with leading dot ("" = none)
        matched: Substring returned by the matcher
        replacement: Text replacing every occurrence ("" = delete)

    Returns:
        The new name, or None when the file should be skipped
    """
    if not passes_extension_filter(file_name, extension_filter):
        return None

    # No match (or an empty literal term) is a skip, never a replacement
    if not matched:
        return None

    new_name = file_name.replace(matched, replacement)
    if new_name == file_name or not new_name:
        return None

    return new_name
