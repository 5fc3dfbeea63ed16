"""
Schema document loading and validation.

A schema document is YAML (or JSON, which YAML also reads) with the same
shape as the designer's persisted store:

    models:
      - name: User
        tableName: users          # optional
        timestamps: true
        softDeletes: false
        fields:
          - {name: email, type: string, length: "255", unique: true}
        relationships:
          - {type: hasMany, relatedModel: Post}

camelCase keys are the canonical form; snake_case is accepted as well.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field as PydanticField,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from laravel_auto_generator.constants import ColumnTypes, RelationshipTypes
from laravel_auto_generator.domain.models import Field, Model, Relationship
from laravel_auto_generator.exceptions import SchemaError

logger = logging.getLogger(__name__)


class _SchemaNode(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


def _blank_to_none(v: Any) -> Any:
    """The designer stores untouched optional inputs as empty strings."""
    if isinstance(v, str) and not v.strip():
        return None
    return v


class FieldSchema(_SchemaNode):
    """Schema for one field of a model."""

    id: Optional[str] = None
    name: str = PydanticField(..., min_length=1)
    type: str = PydanticField(..., min_length=1)
    length: Optional[str] = None
    nullable: bool = False
    unique: bool = False
    index: bool = False
    default: Optional[str] = None

    @field_validator("id", "length", "default", mode="before")
    @classmethod
    def coerce_optional_text(cls, v: Any) -> Optional[str]:
        """Numbers are accepted where the store keeps strings (e.g. length: 255)."""
        v = _blank_to_none(v)
        if isinstance(v, bool):
            return "true" if v else "false"
        if isinstance(v, (int, float)):
            return str(v)
        return v

    def to_domain(self) -> Field:
        return Field(
            id=self.id or "",
            name=self.name,
            type=self.type,
            length=self.length,
            nullable=self.nullable,
            unique=self.unique,
            index=self.index,
            default=self.default,
        )


class RelationshipSchema(_SchemaNode):
    """Schema for one relationship of a model."""

    id: Optional[str] = None
    type: str = PydanticField(..., min_length=1)
    related_model: str = PydanticField(..., min_length=1)
    foreign_key: Optional[str] = None
    local_key: Optional[str] = None
    pivot_table: Optional[str] = None
    morph_type: Optional[str] = None
    morph_id: Optional[str] = None
    through_model: Optional[str] = None

    @field_validator(
        "id", "foreign_key", "local_key", "pivot_table", "morph_type", "morph_id", "through_model",
        mode="before",
    )
    @classmethod
    def coerce_optional_text(cls, v: Any) -> Optional[str]:
        v = _blank_to_none(v)
        return str(v) if isinstance(v, int) else v

    def to_domain(self) -> Relationship:
        return Relationship(
            id=self.id or "",
            type=self.type,
            related_model=self.related_model,
            foreign_key=self.foreign_key,
            local_key=self.local_key,
            pivot_table=self.pivot_table,
            morph_type=self.morph_type,
            morph_id=self.morph_id,
            through_model=self.through_model,
        )


class ModelSchema(_SchemaNode):
    """Schema for one model."""

    id: Optional[str] = None
    name: str = PydanticField(..., min_length=1)
    table_name: Optional[str] = None
    timestamps: bool = True
    soft_deletes: bool = False
    fields: List[FieldSchema] = PydanticField(default_factory=list)
    relationships: List[RelationshipSchema] = PydanticField(default_factory=list)

    @field_validator("id", "table_name", mode="before")
    @classmethod
    def coerce_optional_text(cls, v: Any) -> Optional[str]:
        v = _blank_to_none(v)
        return str(v) if isinstance(v, int) else v

    @field_validator("name")
    @classmethod
    def check_name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("model name cannot be empty or just whitespace")
        return v.strip()

    @model_validator(mode="after")
    def assign_and_check_ids(self) -> "ModelSchema":
        """Missing ids are assigned positionally; explicit ids must be unique."""
        for collection_name, items in (("fields", self.fields), ("relationships", self.relationships)):
            seen = set()
            for index, item in enumerate(items):
                if item.id is None:
                    item.id = f"{collection_name[0]}{index + 1}"
                if item.id in seen:
                    raise ValueError(f"duplicate id '{item.id}' in {collection_name} of model '{self.name}'")
                seen.add(item.id)
        return self

    def to_domain(self) -> Model:
        return Model(
            id=self.id or "",
            name=self.name,
            table_name=self.table_name,
            timestamps=self.timestamps,
            soft_deletes=self.soft_deletes,
            fields=tuple(f.to_domain() for f in self.fields),
            relationships=tuple(r.to_domain() for r in self.relationships),
        )


class SchemaDocument(_SchemaNode):
    """Top level of a schema document."""

    models: List[ModelSchema] = PydanticField(default_factory=list)

    @model_validator(mode="after")
    def check_unique_model_names(self) -> "SchemaDocument":
        seen = set()
        for model in self.models:
            if model.name in seen:
                raise ValueError(f"duplicate model name '{model.name}'")
            seen.add(model.name)
        return self

    def to_domain(self) -> List[Model]:
        return [model.to_domain() for model in self.models]


def warn_about_unsupported_entries(models: List[Model]) -> None:
    """
    Log entries the generators will degrade on. None of them is an error:
    unknown column types are emitted verbatim, unknown or unmapped
    relationship kinds contribute no accessor, and missing relationship
    targets are not resolved.
    """
    known_column_types = set(ColumnTypes.ALL) | ColumnTypes.WITH_LENGTH
    model_names = {model.name for model in models}
    for model in models:
        for field in model.fields:
            if field.type not in known_column_types:
                logger.warning(f"{model.name}.{field.name}: unknown column type '{field.type}'")
        for rel in model.relationships:
            if rel.type not in RelationshipTypes.ALL:
                logger.warning(f"{model.name}: unknown relationship type '{rel.type}'")
            elif rel.pivot_table and rel.type not in RelationshipTypes.WITH_PIVOT_TABLE:
                logger.warning(
                    f"{model.name}: pivot table '{rel.pivot_table}' is ignored for '{rel.type}' relationships"
                )
            if rel.related_model not in model_names:
                logger.warning(
                    f"{model.name}: relationship '{rel.type}' targets '{rel.related_model}', "
                    f"which is not defined in the schema"
                )


def parse_schema(raw: Dict[str, Any], source: str = None) -> List[Model]:
    """
    Validate a raw schema dictionary and convert it into domain models.

    Raises:
        SchemaError: If the document does not match the expected shape
    """
    try:
        document = SchemaDocument.model_validate(raw)
    except ValidationError as e:
        problems = []
        for error in e.errors():
            loc = " -> ".join(str(part) for part in error.get("loc", ())) or "document"
            problems.append(f"{loc}: {error.get('msg', 'invalid value')}")
        raise SchemaError(
            "Schema document is invalid",
            schema_file=source,
            context={'errors': "; ".join(problems)},
        ) from e

    models = document.to_domain()
    warn_about_unsupported_entries(models)
    logger.debug(f"Schema parsed: {len(models)} models")
    return models


def load_schema(schema_path: str) -> List[Model]:
    """
    Load a YAML/JSON schema document from disk.

    Raises:
        SchemaError: If the file is missing, unreadable or invalid
    """
    path = Path(schema_path)
    if not path.is_file():
        raise SchemaError(f"Schema file not found: {schema_path}", schema_file=schema_path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SchemaError(f"Error parsing schema file: {e}", schema_file=schema_path) from e
    except OSError as e:
        raise SchemaError(f"Error reading schema file: {e}", schema_file=schema_path) from e

    if raw is None:
        raw = {}
    if isinstance(raw, list):
        # A bare list of models is accepted as well
        raw = {"models": raw}
    if not isinstance(raw, dict):
        raise SchemaError(
            f"Schema file must contain a mapping with a 'models' list, got {type(raw).__name__}",
            schema_file=schema_path,
        )
    return parse_schema(raw, source=schema_path)
