"""
Core domain models for Laravel Auto Generator.

These models describe a schema as drawn in the designer: models with their
fields and relationships. They are frozen value objects; the generators
never mutate them and always return new strings.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from ..constants import RelationshipTypes


@dataclass(frozen=True)
class Field:
    """
    A column declared on a model.

    `length` is kept as the raw string typed by the user. For decimal
    columns it may encode "precision,scale".
    """

    name: str
    type: str
    id: str = ""
    length: Optional[str] = None
    nullable: bool = False
    unique: bool = False
    index: bool = False
    default: Optional[str] = None


@dataclass(frozen=True)
class Relationship:
    """
    A relationship from the owning model to another model.

    `related_model` is a weak reference: a model name, resolved (if at all)
    by name lookup against the full model list. Optional attributes left
    as None mean "use the convention default".
    """

    type: str
    related_model: str
    id: str = ""
    foreign_key: Optional[str] = None
    local_key: Optional[str] = None
    pivot_table: Optional[str] = None
    morph_type: Optional[str] = None
    morph_id: Optional[str] = None
    through_model: Optional[str] = None


@dataclass(frozen=True)
class Model:
    """
    An Eloquent model bound to one table.
    """

    name: str
    id: str = ""
    table_name: Optional[str] = None
    timestamps: bool = True
    soft_deletes: bool = False
    fields: Tuple[Field, ...] = field(default_factory=tuple)
    relationships: Tuple[Relationship, ...] = field(default_factory=tuple)

    @property
    def belongs_to_relationships(self) -> Tuple[Relationship, ...]:
        """Relationships that put a foreign key column on this model's table."""
        return tuple(rel for rel in self.relationships if rel.type == RelationshipTypes.BELONGS_TO)

    def get_field(self, name: str) -> Optional[Field]:
        """First field called `name`, or None."""
        return next((f for f in self.fields if f.name == name), None)

    @property
    def fillable(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.fields)


@dataclass(frozen=True)
class PivotDescriptor:
    """
    A join table between two models, derived from belongsToMany relationships.

    `models` keeps the order in which the pair was discovered.
    """

    models: Tuple[str, str]
    pivot_table: str


@dataclass(frozen=True)
class GeneratedFile:
    """One emitted artifact, addressed by its path relative to the output root."""

    path: str
    content: str
    kind: str
    source: str  # model name or pivot table name the file was generated from

    @property
    def code_lines(self) -> int:
        return len(self.content.splitlines())
