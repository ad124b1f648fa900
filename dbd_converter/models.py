"""
Core data models for the DBDesigner schema conversion system.

This module defines the Doctrine-side schema records produced by the translator,
the diagnostics it reports, and the result objects returned by the pipeline.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any, Iterator, Union
from enum import Enum


Size = Union[int, str]


class ColumnSize(str):
    """Declared column size as rendered in the schema; digit-only values are written as integers."""


class WarningKind(Enum):
    """Kinds of non-fatal anomalies found while translating a document."""
    MISSING_REFERENCE = "missing_reference"
    UNKNOWN_TYPE = "unknown_type"
    ALIAS_COLLISION = "alias_collision"
    CLASS_COLLISION = "class_collision"


@dataclass
class ColumnDefinition:
    """
    Doctrine column definition.

    Attributes:
        type: Normalized semantic type ("" for unrecognized source types)
        size: Resolved size, None when the type defines no size
        default: Default value copied verbatim from the source, None when absent
        notnull: Column is required
        primary: Column is part of the primary key
        autoincrement: Column is auto incremented
    """
    type: str
    size: Optional[Size] = None
    default: Optional[str] = None
    notnull: bool = False
    primary: bool = False
    autoincrement: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Render only the members that are present or set."""
        data: Dict[str, Any] = {'type': self.type}
        if isinstance(self.size, str):
            data['size'] = ColumnSize(self.size)
        elif self.size is not None:
            data['size'] = self.size
        if self.default is not None:
            data['default'] = self.default
        if self.notnull:
            data['notnull'] = True
        if self.primary:
            data['primary'] = True
        if self.autoincrement:
            data['autoincrement'] = True
        return data


@dataclass
class RelationDefinition:
    """
    Doctrine relation derived from a foreign key.

    Attributes:
        class_name: Class of the referenced table
        foreign: Referenced column on the foreign table
        foreign_alias: Name of the inverse side (owning class name pluralized)
        alias: Name of this side of the relation
        local: Local foreign key column
        on_delete: Delete action token
    """
    class_name: str
    foreign: str
    foreign_alias: str
    alias: str
    local: str
    on_delete: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            'class': self.class_name,
            'foreign': self.foreign,
            'foreignAlias': self.foreign_alias,
            'alias': self.alias,
            'local': self.local,
            'onDelete': self.on_delete,
        }


@dataclass
class IndexDefinition:
    """Unique index over an ordered list of fields."""
    fields: List[str] = field(default_factory=list)
    type: str = "unique"

    def to_dict(self) -> Dict[str, Any]:
        return {'fields': list(self.fields), 'type': self.type}


@dataclass
class TableDefinition:
    """
    Doctrine class definition for one source table.

    Attributes:
        table_name: Source table name, preserved verbatim
        columns: Column definitions keyed by column name, in source order
        relations: Relation definitions keyed by alias
        indexes: Index definitions keyed by index name
    """
    table_name: str
    columns: Dict[str, ColumnDefinition] = field(default_factory=dict)
    relations: Dict[str, RelationDefinition] = field(default_factory=dict)
    indexes: Dict[str, IndexDefinition] = field(default_factory=dict)

    def __post_init__(self):
        """Validate table definition."""
        if self.table_name is None:
            raise ValueError("table_name cannot be None")

    def to_dict(self) -> Dict[str, Any]:
        """Render the table; empty sections are left out."""
        data: Dict[str, Any] = {'tableName': self.table_name}
        if self.columns:
            data['columns'] = {name: column.to_dict() for name, column in self.columns.items()}
        if self.relations:
            data['relations'] = {alias: relation.to_dict() for alias, relation in self.relations.items()}
        if self.indexes:
            data['indexes'] = {name: index.to_dict() for name, index in self.indexes.items()}
        return data


@dataclass
class SchemaModel:
    """
    Target schema: Doctrine class name to table definition, in source order.
    """
    tables: Dict[str, TableDefinition] = field(default_factory=dict)

    def __getitem__(self, class_name: str) -> TableDefinition:
        return self.tables[class_name]

    def __contains__(self, class_name: object) -> bool:
        return class_name in self.tables

    def __iter__(self) -> Iterator[str]:
        return iter(self.tables)

    def __len__(self) -> int:
        return len(self.tables)

    def class_names(self) -> List[str]:
        return list(self.tables)

    def to_dict(self) -> Dict[str, Any]:
        """Nested mapping handed to the schema writer."""
        return {class_name: table.to_dict() for class_name, table in self.tables.items()}


@dataclass
class TranslationWarning:
    """
    A non-fatal anomaly found during translation.

    Attributes:
        kind: Category of the anomaly
        table_name: Source table the anomaly was found in
        message: Human readable description
        node_name: Optional column, constraint or alias the anomaly concerns
    """
    kind: WarningKind
    table_name: str
    message: str
    node_name: Optional[str] = None

    def __str__(self) -> str:
        location = self.table_name
        if self.node_name:
            location += f".{self.node_name}"
        return f"[{self.kind.value}] {location}: {self.message}"


@dataclass
class TranslationResult:
    """
    Output of a single translator pass.

    Attributes:
        schema: The translated schema model
        warnings: Anomalies recovered from during translation, in discovery order
    """
    schema: SchemaModel
    warnings: List[TranslationWarning] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    def warnings_of(self, kind: WarningKind) -> List[TranslationWarning]:
        return [warning for warning in self.warnings if warning.kind == kind]


@dataclass
class ConversionResult:
    """
    Results from a conversion run.

    Attributes:
        source_path: DBDesigner file that was converted
        output_path: Schema file that was written
        tables_converted: Number of classes in the written schema
        warnings: Translation warnings encountered
        processing_time_seconds: Total processing time
    """
    source_path: str
    output_path: str
    tables_converted: int = 0
    warnings: List[TranslationWarning] = None
    processing_time_seconds: float = 0.0

    def __post_init__(self):
        """Initialize default values for mutable fields."""
        if self.warnings is None:
            self.warnings = []

    @property
    def warning_count(self) -> int:
        return len(self.warnings)
