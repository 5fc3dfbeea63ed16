"""
Domain module for Laravel Auto Generator.

This module contains the schema value objects and the naming and
relationship rules, separated from PHP rendering and file output.
"""

from .models import (
    Field,
    Relationship,
    Model,
    PivotDescriptor,
    GeneratedFile,
)

from .naming import (
    pluralize,
    require_model_name,
    table_name,
    default_foreign_key,
    default_pivot_table,
    accessor_name,
    class_name,
    migration_name,
    to_snake_case,
)

from .relationships import (
    PivotTableAnalyzer,
    discover_pivot_tables,
)

__all__ = [
    # Core models
    'Field',
    'Relationship',
    'Model',
    'PivotDescriptor',
    'GeneratedFile',

    # Naming
    'pluralize',
    'require_model_name',
    'table_name',
    'default_foreign_key',
    'default_pivot_table',
    'accessor_name',
    'class_name',
    'migration_name',
    'to_snake_case',

    # Relationships
    'PivotTableAnalyzer',
    'discover_pivot_tables',
]
