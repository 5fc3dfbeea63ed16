"""
Laravel Auto Generator.

Turns a schema of models, fields and relationships into Laravel
migrations, pivot table migrations and Eloquent model classes.
"""

from .domain import (
    Field,
    Relationship,
    Model,
    PivotDescriptor,
    GeneratedFile,
    discover_pivot_tables,
)
from .php_codegen import (
    generate_table_migration,
    generate_pivot_table_code,
    generate_model_code,
    CodeGenerator,
)

__version__ = "0.1.0"

__all__ = [
    'Field',
    'Relationship',
    'Model',
    'PivotDescriptor',
    'GeneratedFile',
    'discover_pivot_tables',
    'generate_table_migration',
    'generate_pivot_table_code',
    'generate_model_code',
    'CodeGenerator',
]
