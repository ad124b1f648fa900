"""
Naming utilities shared by the schema translator.
"""

import re
from typing import Any


class Inflector:
    """Name casing helpers matching the conventions of Doctrine schemas."""

    # Cached regex patterns for performance
    _regex_cache = {
        'namespace': re.compile(r'/(.?)'),
        'separators': re.compile(r'(?:^[_-]*|[_-]+)(.)'),
    }

    FOREIGN_KEY_SUFFIX_LENGTH = 3

    @staticmethod
    def camelize(value: Any) -> str:
        """
        Convert a snake or hyphen separated name to CamelCase.

        Examples:
            'order_item' -> 'OrderItem'
            'user-profile' -> 'UserProfile'
            'admin/user' -> 'Admin::User'

        Args:
            value: Name to convert; None is treated as empty

        Returns:
            CamelCase name, empty string for empty input
        """
        if value is None:
            return ''
        text = str(value)
        text = Inflector._regex_cache['namespace'].sub(lambda m: '::' + m.group(1).upper(), text)
        return Inflector._regex_cache['separators'].sub(lambda m: m.group(1).upper(), text)

    @staticmethod
    def pluralize(value: str) -> str:
        """Append a trailing 's'; not locale aware."""
        return f"{value}s"

    @staticmethod
    def relation_alias(local_column: Any) -> str:
        """
        Derive a relation alias from a foreign key column name.

        Foreign key columns carry a three character suffix (e.g. '_id'),
        which is dropped before camelizing: 'author_id' -> 'Author'.

        Returns:
            The alias, or an empty string when nothing is left after the suffix
        """
        if not local_column:
            return ''
        return Inflector.camelize(str(local_column)[:-Inflector.FOREIGN_KEY_SUFFIX_LENGTH])
