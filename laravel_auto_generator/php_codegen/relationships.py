"""
Eloquent relationship accessors.

Relationship kinds map to accessor methods through an explicit rule table.
Only hasOne, hasMany, belongsTo and belongsToMany have an accessor body;
the through and polymorphic kinds are valid in a schema but contribute no
code here.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List

from laravel_auto_generator.constants import RelationshipTypes
from laravel_auto_generator.domain.models import Model, Relationship
from laravel_auto_generator.domain.naming import (
    accessor_name,
    default_foreign_key,
    default_pivot_table,
)
from laravel_auto_generator.php_codegen.base import (
    INDENT,
    php_call,
    php_class_reference,
    php_string,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RelationshipRule:
    """How one relationship kind is rendered."""

    method: str
    plural_accessor: bool
    uses_pivot_table: bool = False


RELATIONSHIP_RULES: Dict[str, RelationshipRule] = {
    RelationshipTypes.HAS_ONE: RelationshipRule("hasOne", plural_accessor=False),
    RelationshipTypes.HAS_MANY: RelationshipRule("hasMany", plural_accessor=True),
    RelationshipTypes.BELONGS_TO: RelationshipRule("belongsTo", plural_accessor=False),
    RelationshipTypes.BELONGS_TO_MANY: RelationshipRule(
        "belongsToMany", plural_accessor=True, uses_pivot_table=True
    ),
}


def is_mapped_relationship(relationship_type: str) -> bool:
    return relationship_type in RELATIONSHIP_RULES


def _convention_foreign_key(relationship: Relationship, owner_name: str) -> str:
    """
    The key Laravel would infer when none is given: belongsTo keys live on
    the owner and point at the related model; the other kinds key the
    related (or pivot) rows by the owner.
    """
    if relationship.type == RelationshipTypes.BELONGS_TO:
        return default_foreign_key(relationship.related_model)
    return default_foreign_key(owner_name)


def build_method_arguments(relationship: Relationship, owner_name: str) -> List[str]:
    """
    Positional arguments of the relationship call.

    Order is `Related::class`, pivot table (belongsToMany only), foreign key,
    local key. Explicit values are passed through; an earlier positional
    argument is filled with its convention default only when a later one is
    set, so that e.g. a lone local key is never read as a foreign key.
    """
    rule = RELATIONSHIP_RULES[relationship.type]

    optional: List[tuple] = []
    if rule.uses_pivot_table:
        optional.append((
            relationship.pivot_table,
            lambda: default_pivot_table(owner_name, relationship.related_model),
        ))
    optional.append((relationship.foreign_key, lambda: _convention_foreign_key(relationship, owner_name)))
    optional.append((relationship.local_key, None))

    last_set = max((i for i, (value, _) in enumerate(optional) if value), default=-1)

    args = [php_class_reference(relationship.related_model)]
    for value, fallback in optional[:last_set + 1]:
        args.append(php_string(value or fallback()))
    return args


def generate_relationship_method(relationship: Relationship, owner_name: str) -> str:
    """
    Accessor method for one relationship, indented for a class body.

    Returns an empty string for relationship kinds without an accessor rule.
    """
    rule = RELATIONSHIP_RULES.get(relationship.type)
    if rule is None:
        logger.debug(
            f"No accessor for '{relationship.type}' relationship {owner_name} -> "
            f"{relationship.related_model}; skipping"
        )
        return ""

    name = accessor_name(relationship.related_model, plural=rule.plural_accessor)
    call = php_call("$this", rule.method, build_method_arguments(relationship, owner_name))
    return "\n".join([
        f"{INDENT}public function {name}()",
        f"{INDENT}{{",
        f"{INDENT * 2}return {call};",
        f"{INDENT}}}",
    ])


def generate_relationship_methods(model: Model) -> List[str]:
    """Accessor snippets of all mapped relationships, in declaration order."""
    methods = (generate_relationship_method(rel, model.name) for rel in model.relationships)
    return [method for method in methods if method]
