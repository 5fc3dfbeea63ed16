"""
Centralized constants for Laravel Auto Generator.

This module contains the supported column and relationship kinds, default
configuration values and the fixed Laravel literals used by the emitters.
Keeping them together makes it easy for contributors to retarget the
generator at another framework version.
"""

from typing import Dict, Set, List


# =============================================================================
# CORE CONFIGURATION
# =============================================================================

class DefaultConfig:
    """Default configuration values."""

    OUTPUT_DIR = "./generated_laravel"
    MODELS_PATH = "app/Models"
    MIGRATIONS_PATH = "database/migrations"

    # Laravel migration file prefix, e.g. 2024_01_31_120000
    MIGRATION_TIMESTAMP_FORMAT = "%Y_%m_%d_%H%M%S"
    MIGRATION_TIMESTAMP_PATTERN = r"^\d{4}_\d{2}_\d{2}_\d{6}$"

    GENERATE_MODELS = True
    GENERATE_MIGRATIONS = True
    GENERATE_PIVOT_TABLES = True


# =============================================================================
# COLUMN TYPES
# =============================================================================

class ColumnTypes:
    """Schema builder column types accepted by the field form."""

    STRING = "string"
    CHAR = "char"
    DECIMAL = "decimal"

    ALL: List[str] = [
        "string",
        "text",
        "integer",
        "bigInteger",
        "float",
        "double",
        "decimal",
        "boolean",
        "date",
        "dateTime",
        "time",
        "timestamp",
        "json",
        "uuid",
        "binary",
        "enum",
        "foreignId",
        "morphs",
        "nullableMorphs",
        "rememberToken",
        "ipAddress",
        "macAddress",
        "year",
    ]

    # Types whose `length` is rendered as column arguments
    WITH_LENGTH: Set[str] = {STRING, CHAR, DECIMAL}

    DEFAULT_DECIMAL_SCALE = "2"


# =============================================================================
# RELATIONSHIP TYPES
# =============================================================================

class RelationshipTypes:
    """Eloquent relationship kinds."""

    HAS_ONE = "hasOne"
    HAS_MANY = "hasMany"
    BELONGS_TO = "belongsTo"
    BELONGS_TO_MANY = "belongsToMany"
    HAS_MANY_THROUGH = "hasManyThrough"
    HAS_ONE_THROUGH = "hasOneThrough"
    MORPH_ONE = "morphOne"
    MORPH_MANY = "morphMany"
    MORPH_TO = "morphTo"
    MORPH_TO_MANY = "morphToMany"
    MORPHED_BY_MANY = "morphedByMany"

    ALL: List[str] = [
        HAS_ONE,
        HAS_MANY,
        BELONGS_TO,
        BELONGS_TO_MANY,
        HAS_MANY_THROUGH,
        HAS_ONE_THROUGH,
        MORPH_ONE,
        MORPH_MANY,
        MORPH_TO,
        MORPH_TO_MANY,
        MORPHED_BY_MANY,
    ]

    DESCRIPTIONS: Dict[str, str] = {
        HAS_ONE: "A one-to-one relationship. E.g., a User has one Profile.",
        HAS_MANY: "A one-to-many relationship. E.g., a User has many Posts.",
        BELONGS_TO: "The inverse of hasOne or hasMany. E.g., a Post belongs to a User.",
        BELONGS_TO_MANY: "A many-to-many relationship. E.g., a User belongs to many Roles.",
        HAS_MANY_THROUGH: "A relationship through an intermediate model. E.g., a Country has many Posts through Users.",
        HAS_ONE_THROUGH: "Similar to hasManyThrough, but for a single related model.",
        MORPH_ONE: "A polymorphic one-to-one relationship.",
        MORPH_MANY: "A polymorphic one-to-many relationship.",
        MORPH_TO: "The inverse of morphOne or morphMany.",
        MORPH_TO_MANY: "A polymorphic many-to-many relationship.",
        MORPHED_BY_MANY: "The inverse of morphToMany.",
    }

    # Kinds that accept an explicit pivot table in the form
    WITH_PIVOT_TABLE: Set[str] = {BELONGS_TO_MANY, MORPH_TO_MANY, MORPHED_BY_MANY}


# =============================================================================
# LARAVEL LITERALS
# =============================================================================

class LaravelNames:
    """Fixed names emitted into generated PHP."""

    MODEL_NAMESPACE = "App\\Models"
    MIGRATION_CLASS_PREFIX = "Create"
    MIGRATION_CLASS_SUFFIX = "Table"
    FOREIGN_KEY_SUFFIX = "_id"
    PLURAL_SUFFIX = "s"
    PIVOT_SEPARATOR = "_"
    ON_DELETE = "cascade"

    BASE_TRAITS: List[str] = ["HasFactory"]
    SOFT_DELETES_TRAIT = "SoftDeletes"


class TemplateNames:
    """jinja2 templates shipped in laravel_auto_generator/templates."""

    CREATE_TABLE_MIGRATION = "create_table_migration.php.j2"
    PIVOT_TABLE_MIGRATION = "pivot_table_migration.php.j2"
    MODEL = "model.php.j2"


class ArtifactKinds:
    """Kinds of generated files."""

    MIGRATION = "migration"
    PIVOT_MIGRATION = "pivot_migration"
    MODEL = "model"
