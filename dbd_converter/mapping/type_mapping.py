"""
Source type to Doctrine type normalization.

The table below is the single source of truth for column types. Unrecognized
tokens degrade to an empty type with no size instead of failing, so partially
modeled exports still convert.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from ..models import Size


DEFAULT_INTEGER_SIZE = 4
CHAR_SIZE = 1
TEXT_SIZE = 4000


@dataclass(frozen=True)
class ResolvedType:
    """Semantic type and size for one column; size None means no size key."""
    type: str
    size: Optional[Size] = None


def _integer_size(declared_size: Optional[str]) -> Size:
    # "0" counts as not declared
    if declared_size and declared_size != "0":
        return declared_size
    return DEFAULT_INTEGER_SIZE


def _declared_size(declared_size: Optional[str]) -> Size:
    return declared_size if declared_size is not None else ""


def _fixed(size: int) -> Callable[[Optional[str]], Size]:
    return lambda declared_size: size


def _no_size(declared_size: Optional[str]) -> None:
    return None


TYPE_MAPPING: Dict[str, Tuple[str, Callable[[Optional[str]], Optional[Size]]]] = {
    'INTEGER': ('integer', _integer_size),
    'STRING': ('string', _declared_size),
    'CHAR': ('string', _fixed(CHAR_SIZE)),
    'TEXT': ('string', _fixed(TEXT_SIZE)),
    'TIMESTAMP': ('timestamp', _no_size),
    'DATE': ('date', _no_size),
    'DATETIME': ('datetime', _no_size),
    'FLOAT': ('float', _no_size),
    'BOOLEAN': ('boolean', _no_size),
}

UNKNOWN_TYPE = ResolvedType(type="")


def is_known_type(source_type: Optional[str]) -> bool:
    """Return True if the token has an entry in the mapping table."""
    return source_type in TYPE_MAPPING


def resolve_column_type(source_type: Optional[str], declared_size: Optional[str] = None) -> ResolvedType:
    """
    Resolve a declared source type and size to a Doctrine type and size.

    Args:
        source_type: Type token from the column element (e.g. 'INTEGER')
        declared_size: Raw size attribute, None when absent

    Returns:
        ResolvedType; unknown tokens give an empty type and no size
    """
    rule = TYPE_MAPPING.get(source_type)
    if rule is None:
        return UNKNOWN_TYPE
    semantic_type, size_rule = rule
    return ResolvedType(type=semantic_type, size=size_rule(declared_size))
