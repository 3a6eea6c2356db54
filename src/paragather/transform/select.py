"""Column selection - resolve user-facing selections to concrete column names.

Resolution is a separate pure stage that runs before any reshape work, so the
gather functions only ever see ordered lists of existing column names.

Supported selections:
    "Ca"                    exact column name
    2, -1                   zero-based column position (an equal integer header wins)
    starts_with("Ca")       helper selectors, matched in table order
    ["Ca", "Ti", "V"]       list of any of the above (first occurrence wins)
    "Ca:V", "*_sd", "re:^d" textual form, see parse_selection()
"""
import fnmatch
import logging
import re
from typing import Callable, List, Sequence

from ..errors import ColumnNotFoundError

logger = logging.getLogger(__name__)

GLOB_CHARS = set('*?[')
REGEX_PREFIX = 're:'


class Selector:
    """A deferred column selection evaluated against a list of column names."""

    def __init__(self, func: Callable[[List[str]], List[str]], description: str):
        self._func = func
        self.description = description

    def __call__(self, columns: Sequence[str]) -> List[str]:
        return self._func(list(columns))

    def __repr__(self) -> str:
        return f"Selector({self.description})"


def starts_with(prefix: str, ignore_case: bool = False) -> Selector:
    """Select columns whose name starts with prefix."""
    def func(columns):
        if ignore_case:
            return [c for c in columns if str(c).lower().startswith(prefix.lower())]
        return [c for c in columns if str(c).startswith(prefix)]
    return Selector(func, f"starts_with({prefix!r})")


def ends_with(suffix: str, ignore_case: bool = False) -> Selector:
    """Select columns whose name ends with suffix."""
    def func(columns):
        if ignore_case:
            return [c for c in columns if str(c).lower().endswith(suffix.lower())]
        return [c for c in columns if str(c).endswith(suffix)]
    return Selector(func, f"ends_with({suffix!r})")


def contains(text: str, ignore_case: bool = False) -> Selector:
    """Select columns whose name contains text."""
    def func(columns):
        if ignore_case:
            return [c for c in columns if text.lower() in str(c).lower()]
        return [c for c in columns if text in str(c)]
    return Selector(func, f"contains({text!r})")


def matches(pattern: str, ignore_case: bool = False) -> Selector:
    """Select columns whose name matches a regular expression (re.search)."""
    regex = re.compile(pattern, re.IGNORECASE if ignore_case else 0)

    def func(columns):
        return [c for c in columns if regex.search(str(c))]
    return Selector(func, f"matches({pattern!r})")


def glob(pattern: str) -> Selector:
    """Select columns whose name matches a shell-style wildcard pattern."""
    def func(columns):
        return [c for c in columns if fnmatch.fnmatchcase(str(c), pattern)]
    return Selector(func, f"glob({pattern!r})")


def col_range(start: str, end: str) -> Selector:
    """Select a contiguous run of columns, inclusive of both ends.

    If end comes before start in the table the run is returned reversed.
    """
    def func(columns):
        for name in (start, end):
            if name not in columns:
                raise ColumnNotFoundError(name)
        i, j = columns.index(start), columns.index(end)
        if i <= j:
            return columns[i:j + 1]
        return columns[j:i + 1][::-1]
    return Selector(func, f"col_range({start!r}, {end!r})")


def everything() -> Selector:
    """Select all columns."""
    return Selector(lambda columns: list(columns), "everything()")


def looks_like_selection(text: str) -> bool:
    """Check if a string uses the textual selection syntax rather than naming a column."""
    if text.startswith(REGEX_PREFIX):
        return True
    return ',' in text or ':' in text or bool(GLOB_CHARS & set(text))


def parse_selection(text: str) -> List:
    """
    Parse the textual selection syntax used on the command line and in configs.

    Tokens are comma separated:
        "Ca,Ti,V"    literal names
        "Ca:V"       inclusive range
        "*_sd"       glob
        "re:_sd$"    regular expression

    Returns a list of names and Selector objects for resolve_columns().
    """
    items: List = []
    for token in text.split(','):
        token = token.strip()
        if not token:
            continue
        if token.startswith(REGEX_PREFIX):
            items.append(matches(token[len(REGEX_PREFIX):]))
        elif GLOB_CHARS & set(token):
            items.append(glob(token))
        elif ':' in token:
            start, _, end = token.partition(':')
            items.append(col_range(start.strip(), end.strip()))
        else:
            items.append(token)
    return items


def resolve_columns(selection, available: Sequence[str]) -> List[str]:
    """
    Resolve a selection to an ordered list of existing column names.

    Raises:
        ColumnNotFoundError: a literal name, position, or range endpoint
            does not exist in available.
    """
    columns = list(available)
    resolved: List[str] = []

    for name in _resolve(selection, columns):
        if name not in resolved:
            resolved.append(name)

    logger.debug(f"Resolved {selection!r} -> {resolved}")
    return resolved


def _resolve(selection, columns: List[str]) -> List[str]:
    if isinstance(selection, Selector):
        return selection(columns)

    if isinstance(selection, str):
        if selection in columns:
            return [selection]
        if looks_like_selection(selection):
            return _resolve(parse_selection(selection), columns)
        raise ColumnNotFoundError(selection)

    # bool is an int subclass but never a position
    if isinstance(selection, int) and not isinstance(selection, bool):
        # integer headers (years) win over positions
        if selection in columns:
            return [selection]
        if -len(columns) <= selection < len(columns):
            return [columns[selection]]
        raise ColumnNotFoundError(selection, f"Column position out of range: {selection}")

    if isinstance(selection, (list, tuple)):
        result: List[str] = []
        for item in selection:
            result.extend(_resolve(item, columns))
        return result

    if callable(selection):
        return list(selection(columns))

    # Other non-string labels (floats, timestamps)
    if selection in columns:
        return [selection]
    raise ColumnNotFoundError(selection)
