import logging
from typing import List

from laravel_auto_generator.constants import TemplateNames
from laravel_auto_generator.domain.models import Model, PivotDescriptor
from laravel_auto_generator.domain.naming import default_foreign_key, require_model_name, table_name
from laravel_auto_generator.php_codegen.base import php_string, render_template
from laravel_auto_generator.php_codegen.columns import (
    TABLE_VAR,
    generate_column_line,
    generate_foreign_key_line,
    generate_pivot_foreign_key_line,
    generate_simple_line,
)

logger = logging.getLogger(__name__)


def build_table_column_lines(model: Model) -> List[str]:
    """
    Column lines of a create-table migration, in the order
    id, declared fields, belongsTo foreign keys, timestamps, soft deletes.
    """
    lines = [generate_simple_line("id")]
    lines.extend(generate_column_line(field) for field in model.fields)
    lines.extend(generate_foreign_key_line(rel) for rel in model.belongs_to_relationships)
    if model.timestamps:
        lines.append(generate_simple_line("timestamps"))
    if model.soft_deletes:
        lines.append(generate_simple_line("softDeletes"))
    return lines


def generate_table_migration(model: Model) -> str:
    """
    Create-table migration for one model.

    Raises:
        SchemaError: If the model has no name
    """
    require_model_name(model)
    resolved_table = table_name(model)
    logger.debug(f"Rendering create migration for {model.name} (table '{resolved_table}')")
    return render_template(TemplateNames.CREATE_TABLE_MIGRATION, {
        "table_name": resolved_table,
        "column_lines": build_table_column_lines(model),
    })


def pivot_foreign_keys(pivot: PivotDescriptor) -> List[str]:
    """Foreign key columns of a pivot table, one per model, sorted by lowercased name."""
    return [default_foreign_key(name) for name in sorted(pivot.models, key=str.lower)]


def generate_pivot_table_code(pivot: PivotDescriptor) -> str:
    """
    Migration for the join table of a many-to-many pair, with a composite
    unique constraint over both foreign keys.
    """
    keys = pivot_foreign_keys(pivot)
    logger.debug(f"Rendering pivot migration for '{pivot.pivot_table}' ({', '.join(pivot.models)})")
    column_lines = [generate_simple_line("id")]
    column_lines.extend(generate_pivot_foreign_key_line(key) for key in keys)
    column_lines.append(generate_simple_line("timestamps"))
    unique_columns = ", ".join(php_string(key) for key in keys)
    return render_template(TemplateNames.PIVOT_TABLE_MIGRATION, {
        "table_name": pivot.pivot_table,
        "column_lines": column_lines,
        "unique_line": f"{TABLE_VAR}->unique([{unique_columns}]);",
    })
