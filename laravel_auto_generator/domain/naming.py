"""
Naming convention utilities for Laravel Auto Generator.

This module derives the names Laravel would infer on its own: table names,
foreign keys, pivot tables and migration titles, used whenever the schema
does not carry an explicit override.

Pluralization is deliberately naive: a literal "s" is appended everywhere
(table names, pivot member names, accessor method names), so "Category"
becomes "categorys". Irregular English plurals are out of scope.
"""

import re

from ..constants import LaravelNames
from ..exceptions import raise_schema_error
from .models import Model


def pluralize(word: str) -> str:
    """
    Append the plural suffix to a word.

    Example:
        >>> pluralize("post")
        'posts'
        >>> pluralize("category")
        'categorys'
    """
    return f"{word}{LaravelNames.PLURAL_SUFFIX}"


def require_model_name(model: Model) -> str:
    """
    Return the model name, failing fast when it is empty.

    A non-empty name is a precondition of every generator; the designer is
    expected to enforce it before calling in.

    Raises:
        SchemaError: If the model name is empty or blank
    """
    name = model.name
    if not isinstance(name, str) or not name.strip():
        raise_schema_error(
            "Model name must be a non-empty string before code can be generated",
            model=repr(name),
            context={'model_id': model.id} if model.id else {},
        )
    return name


def table_name(model: Model) -> str:
    """
    Resolve the table a model is stored in.

    Returns the explicit `table_name` when set, otherwise the lowercased
    model name with the plural suffix.

    Example:
        >>> table_name(Model(name="Post"))
        'posts'
    """
    if model.table_name and model.table_name.strip():
        return model.table_name
    return pluralize(require_model_name(model).lower())


def default_foreign_key(related_model_name: str) -> str:
    """
    Foreign key column pointing at `related_model_name`.

    Example:
        >>> default_foreign_key("User")
        'user_id'
    """
    return f"{related_model_name.lower()}{LaravelNames.FOREIGN_KEY_SUFFIX}"


def default_pivot_table(name_a: str, name_b: str) -> str:
    """
    Join table name for a many-to-many pair: both names lowercased,
    sorted ascending and joined with an underscore.

    Example:
        >>> default_pivot_table("User", "Role")
        'role_user'
    """
    return LaravelNames.PIVOT_SEPARATOR.join(sorted([name_a.lower(), name_b.lower()]))


def accessor_name(related_model_name: str, plural: bool = False) -> str:
    """Relationship accessor method name on the owning model."""
    name = related_model_name.lower()
    return pluralize(name) if plural else name


def _capitalize_first(segment: str) -> str:
    return segment[:1].upper() + segment[1:]


def class_name(table: str) -> str:
    """
    Title of the migration that creates `table`.

    Each underscore-delimited segment has its first letter capitalized
    (the rest is left untouched).

    Example:
        >>> class_name("role_user")
        'CreateRoleUserTable'
    """
    body = "".join(_capitalize_first(segment) for segment in table.split("_"))
    return f"{LaravelNames.MIGRATION_CLASS_PREFIX}{body}{LaravelNames.MIGRATION_CLASS_SUFFIX}"


def to_snake_case(name: str) -> str:
    """
    Convert CamelCase or PascalCase to snake_case.

    Example:
        >>> to_snake_case("CreateRoleUserTable")
        'create_role_user_table'
    """
    name = re.sub("(.)([A-Z][a-z]+)", r"\1_\2", name)
    name = re.sub("__([A-Z])", r"_\1", name)
    name = re.sub("([a-z0-9])([A-Z])", r"\1_\2", name)
    return name.lower()


def migration_name(table: str) -> str:
    """
    Migration file stem (without timestamp) for creating `table`.

    Example:
        >>> migration_name("posts")
        'create_posts_table'
    """
    return f"create_{table.lower()}_table"
