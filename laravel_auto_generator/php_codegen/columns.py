"""
Column definitions for Laravel schema builder migrations.

A column line is assembled from three independently testable pieces:
the base call arguments, the ordered modifier chain and the line wrapper.
"""

import logging
from typing import List

from laravel_auto_generator.constants import ColumnTypes, LaravelNames
from laravel_auto_generator.domain.models import Field, Relationship
from laravel_auto_generator.domain.naming import default_foreign_key, pluralize
from laravel_auto_generator.php_codegen.base import php_call, php_string

logger = logging.getLogger(__name__)

TABLE_VAR = "$table"


def split_decimal_length(length: str):
    """
    Split a decimal `length` into (precision, scale).

    Precision is everything before the first comma (the whole string when
    there is none); an omitted or empty scale defaults to 2. Values are not
    checked for numeric-ness.
    """
    precision, _, scale = length.partition(",")
    return precision, scale or ColumnTypes.DEFAULT_DECIMAL_SCALE


def build_column_arguments(field: Field) -> List[str]:
    """Arguments of the column type call: name, then length or precision/scale."""
    args = [php_string(field.name)]
    if field.length and field.type in ColumnTypes.WITH_LENGTH:
        if field.type == ColumnTypes.DECIMAL:
            args.extend(split_decimal_length(field.length))
        else:
            args.append(field.length)
    return args


def build_column_modifiers(field: Field) -> List[str]:
    """
    Modifier calls in fixed order: nullable, unique, index, default.

    `default` is emitted verbatim, so it must already be a PHP literal.
    """
    modifiers = []
    if field.nullable:
        modifiers.append("nullable()")
    if field.unique:
        modifiers.append("unique()")
    if field.index:
        modifiers.append("index()")
    if field.default:
        modifiers.append(f"default({field.default})")
    return modifiers


def _chain(call: str, modifiers: List[str]) -> str:
    return "".join([call] + [f"->{modifier}" for modifier in modifiers]) + ";"


def generate_column_line(field: Field) -> str:
    """
    One column definition, e.g. `$table->string('email', 255)->nullable()->unique();`.

    Unknown column types still emit a bare call with the field name.
    """
    if field.type not in ColumnTypes.ALL and field.type != ColumnTypes.CHAR:
        logger.debug(f"Column '{field.name}' has unrecognized type '{field.type}'; emitting it as-is")
    call = php_call(TABLE_VAR, field.type, build_column_arguments(field))
    return _chain(call, build_column_modifiers(field))


def generate_foreign_key_line(relationship: Relationship) -> str:
    """
    Foreign id column for a belongsTo relationship, constrained to the
    related model's (naively pluralized) table with cascading deletes.
    """
    foreign_key = relationship.foreign_key or default_foreign_key(relationship.related_model)
    related_table = pluralize(relationship.related_model.lower())
    call = php_call(TABLE_VAR, "foreignId", [php_string(foreign_key)])
    return _chain(call, [
        f"constrained({php_string(related_table)})",
        f"onDelete({php_string(LaravelNames.ON_DELETE)})",
    ])


def generate_pivot_foreign_key_line(column: str) -> str:
    """Foreign id on a pivot table, with the table inferred by Laravel."""
    call = php_call(TABLE_VAR, "foreignId", [php_string(column)])
    return _chain(call, ["constrained()", f"onDelete({php_string(LaravelNames.ON_DELETE)})"])


def generate_simple_line(method: str) -> str:
    """Argument-less blueprint call such as `$table->id();`."""
    return php_call(TABLE_VAR, method, []) + ";"
