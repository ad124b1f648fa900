"""
Relational document to Doctrine schema translation.

The translator walks a canonical relational document once, table by table,
and builds a SchemaModel. Anomalies inside a table (a foreign key without a
reference, an unknown column type, colliding relation aliases) are recovered
from locally and reported as TranslationWarning entries; they never abort
the translation of the remaining tables.
"""

import logging

from typing import List, Optional

from lxml import etree

from ..interfaces import SchemaTranslatorInterface
from ..exceptions import SchemaTranslationError
from ..models import (
    ColumnDefinition,
    IndexDefinition,
    RelationDefinition,
    SchemaModel,
    TableDefinition,
    TranslationResult,
    TranslationWarning,
    WarningKind,
)
from ..utils import Inflector
from .type_mapping import resolve_column_type, is_known_type


TABLE_XPATH = "descendant-or-self::table"

COLUMN_TAG = "column"
FOREIGN_KEY_TAG = "foreign-key"
REFERENCE_TAG = "reference"
UNIQUE_TAG = "unique"
UNIQUE_COLUMN_TAG = "unique-column"

ON_DELETE_SET_NULL = "setnull"


class SchemaTranslator(SchemaTranslatorInterface):
    """
    Translates the canonical relational XML into a Doctrine schema model.

    Translation rules:
    - Every <table> element becomes one class, keyed by the camelized table name
    - <column> children become column definitions via the type mapping table
    - <foreign-key> children become relations keyed by an alias derived from the
      local column (suffix dropped, camelized), falling back to the foreign class
    - <unique> children become unique indexes over their <unique-column> members
    - Any other child node is ignored

    Children are visited in document order, so when two foreign keys of a table
    resolve to the same alias the later one wins. Tables whose names camelize to
    the same class are merged into one definition carrying the later table name.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def translate(self, document) -> TranslationResult:
        """
        Translate a relational document into a schema model.

        Args:
            document: lxml element or element tree; only <table> elements at or
                below it are translated

        Returns:
            TranslationResult with the schema and the warnings collected

        Raises:
            SchemaTranslationError: If the document is not an XML element or tree
        """
        if not isinstance(document, (etree._Element, etree._ElementTree)):
            raise SchemaTranslationError(
                f"Expected an XML element or element tree, got {type(document).__name__}"
            )

        schema = SchemaModel()
        warnings: List[TranslationWarning] = []

        for table_node in document.xpath(TABLE_XPATH):
            table_name = table_node.get('name', '')
            class_name = Inflector.camelize(table_name)

            if class_name in schema:
                table = schema[class_name]
                self._warn(warnings, TranslationWarning(
                    kind=WarningKind.CLASS_COLLISION,
                    table_name=table_name,
                    message=(f"class name '{class_name}' already used by table "
                             f"'{table.table_name}', definitions merged"),
                ))
                table.table_name = table_name
            else:
                table = schema.tables[class_name] = TableDefinition(table_name=table_name)

            self._translate_table(table_node, table, class_name, warnings)
            self.logger.debug(f"Translated table '{table_name}' as {class_name}")

        self.logger.info(f"Translated {len(schema)} tables with {len(warnings)} warnings")
        return TranslationResult(schema=schema, warnings=warnings)

    def _translate_table(self, table_node: etree._Element, table: TableDefinition, class_name: str,
                         warnings: List[TranslationWarning]) -> None:
        """Add the columns, relations and indexes of a <table> element to its definition."""
        table_name = table.table_name

        for child in table_node:
            # Comments and processing instructions have a non-string tag
            if not isinstance(child.tag, str):
                continue

            if child.tag == COLUMN_TAG:
                column_name = child.get('name', '')
                table.columns[column_name] = self._build_column(child, table_name, warnings)

            elif child.tag == FOREIGN_KEY_TAG:
                relation = self._build_relation(child, class_name)
                if relation is None:
                    self._warn(warnings, TranslationWarning(
                        kind=WarningKind.MISSING_REFERENCE,
                        table_name=table_name,
                        node_name=child.get('foreignTable'),
                        message="foreign key has no <reference> child and was skipped",
                    ))
                    continue
                if relation.alias in table.relations:
                    self._warn(warnings, TranslationWarning(
                        kind=WarningKind.ALIAS_COLLISION,
                        table_name=table_name,
                        node_name=relation.alias,
                        message=(f"relation on '{relation.local}' replaces the relation on "
                                 f"'{table.relations[relation.alias].local}' with the same alias"),
                    ))
                table.relations[relation.alias] = relation

            elif child.tag == UNIQUE_TAG:
                table.indexes[child.get('name', '')] = self._build_index(child)

    def _build_column(self, node: etree._Element, table_name: str,
                      warnings: List[TranslationWarning]) -> ColumnDefinition:
        source_type = node.get('type')
        resolved = resolve_column_type(source_type, node.get('size'))

        if not is_known_type(source_type):
            self._warn(warnings, TranslationWarning(
                kind=WarningKind.UNKNOWN_TYPE,
                table_name=table_name,
                node_name=node.get('name', ''),
                message=f"unrecognized column type '{source_type}', emitted with an empty type",
            ))

        return ColumnDefinition(
            type=resolved.type,
            size=resolved.size,
            default=node.get('default'),
            notnull=node.get('required') == "true",
            primary=node.get('primaryKey') == "true",
            autoincrement=node.get('autoIncrement') == "true",
        )

    def _build_relation(self, node: etree._Element, class_name: str) -> Optional[RelationDefinition]:
        """Build the relation for a foreign key, or None when it has no reference."""
        reference = self._first_child(node, REFERENCE_TAG)
        if reference is None:
            return None

        foreign_class = Inflector.camelize(node.get('foreignTable', ''))

        on_delete = node.get('onDelete', '')
        if on_delete == ON_DELETE_SET_NULL:
            on_delete = "null"

        local = reference.get('local', '')
        alias = Inflector.relation_alias(local) or foreign_class

        return RelationDefinition(
            class_name=foreign_class,
            foreign=reference.get('foreign', ''),
            foreign_alias=Inflector.pluralize(class_name),
            alias=alias,
            local=local,
            on_delete=on_delete,
        )

    def _build_index(self, node: etree._Element) -> IndexDefinition:
        fields = [child.get('name', '') for child in node if child.tag == UNIQUE_COLUMN_TAG]
        return IndexDefinition(fields=fields)

    @staticmethod
    def _first_child(node: etree._Element, tag: str) -> Optional[etree._Element]:
        for child in node:
            if child.tag == tag:
                return child
        return None

    def _warn(self, warnings: List[TranslationWarning], warning: TranslationWarning) -> None:
        warnings.append(warning)
        self.logger.warning(str(warning))
