from argparse import Namespace
import sys
import logging
import re
from typing import Optional, Dict, Any, Self
import yaml
from datetime import datetime
from pathlib import Path

from pydantic import (
    BaseModel,
    Field,
    ValidationError,
    field_validator,
    model_validator,
    ConfigDict,
)

from laravel_auto_generator.constants import DefaultConfig
from laravel_auto_generator.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


# --- Pydantic Model for Configuration Schema ---
class ToolConfigSchema(BaseModel):
    """Pydantic schema defining the expected structure and types for the configuration."""

    schema_file: str = Field(
        ...,
        min_length=1,
        description="Path to the YAML/JSON schema document describing the models.",
    )
    output_dir: str = Field(
        DefaultConfig.OUTPUT_DIR,
        min_length=1,
        description="Directory the Laravel files (or the archive) are written to.",
    )
    models_path: str = Field(
        DefaultConfig.MODELS_PATH,
        min_length=1,
        description="Model class directory, relative to output_dir.",
    )
    migrations_path: str = Field(
        DefaultConfig.MIGRATIONS_PATH,
        min_length=1,
        description="Migration directory, relative to output_dir.",
    )
    migration_timestamp: Optional[str] = Field(
        default=None,
        description="Timestamp prefix of the first migration (YYYY_MM_DD_HHMMSS). Defaults to now.",
    )
    generate_models: bool = Field(
        default=DefaultConfig.GENERATE_MODELS, description="Whether to generate Eloquent model classes."
    )
    generate_migrations: bool = Field(
        default=DefaultConfig.GENERATE_MIGRATIONS, description="Whether to generate create-table migrations."
    )
    generate_pivot_tables: bool = Field(
        default=DefaultConfig.GENERATE_PIVOT_TABLES, description="Whether to generate pivot table migrations."
    )
    archive_name: Optional[str] = Field(
        default=None,
        description="If set, bundle all files into this zip archive inside output_dir instead of a file tree.",
    )

    @field_validator("models_path", "migrations_path")
    @classmethod
    def check_relative_path(cls, v: str) -> str:
        """Output sub-directories must stay inside output_dir."""
        path = Path(v)
        if path.is_absolute() or ".." in path.parts:
            raise ValueError(f"'{v}' must be a relative path inside output_dir.")
        return path.as_posix()

    @field_validator("migration_timestamp", mode="before")
    @classmethod
    def check_migration_timestamp(cls, v: Any) -> Optional[str]:
        """Ensure the timestamp looks like a Laravel migration prefix and is a real date."""
        if v is None or v == "":
            return None
        v = str(v)
        if not re.match(DefaultConfig.MIGRATION_TIMESTAMP_PATTERN, v):
            raise ValueError(f"Migration timestamp must look like 2024_01_31_120000, got '{v}'")
        try:
            datetime.strptime(v, DefaultConfig.MIGRATION_TIMESTAMP_FORMAT)
        except ValueError:
            raise ValueError(f"Migration timestamp '{v}' is not a valid date and time")
        return v

    @field_validator("archive_name")
    @classmethod
    def check_archive_name(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        if not v.endswith(".zip") or len(v) <= len(".zip"):
            raise ValueError(f"Archive name must be a file name ending in '.zip', got '{v}'")
        if Path(v).name != v:
            raise ValueError(f"Archive name must not contain directories, got '{v}'")
        return v

    @model_validator(mode="after")
    def check_something_to_generate(self) -> Self:
        """At least one kind of artifact has to be enabled."""
        if not (self.generate_models or self.generate_migrations or self.generate_pivot_tables):
            raise ValueError(
                "Nothing to generate: enable at least one of generate_models, "
                "generate_migrations or generate_pivot_tables."
            )
        return self

    model_config = ConfigDict(
        extra="ignore",  # Allow and ignore extra fields from input dict
    )


# --- Validation Function ---
def validate_and_parse_config(config_dict: Dict[str, Any]) -> ToolConfigSchema:
    """
    Validates a raw configuration dictionary against the ToolConfigSchema.
    Exits with error messages if validation fails.
    """
    try:
        validated_config = ToolConfigSchema.model_validate(config_dict)
        logger.debug("Configuration dictionary parsed and validated successfully against schema.")
        return validated_config
    except ValidationError as e:
        logger.critical(
            "Configuration validation failed! Please check your config file or arguments."
        )
        print("\n--- Configuration Errors ---", file=sys.stderr)
        for error in e.errors():
            loc_parts = [str(loc_item) for loc_item in error.get("loc", ())]
            loc_str = " -> ".join(loc_parts) if loc_parts else "Model Level"
            msg = error.get("msg", "Unknown validation error")

            print(f"  - Location: '{loc_str}'", file=sys.stderr)
            print(f"    Error:    {msg}", file=sys.stderr)
            if "schema_file" in loc_parts and error.get("type") == "missing":
                print(
                    "    Hint:     Pass the schema document with -s/--schema or set 'schema_file' in the config.",
                    file=sys.stderr,
                )

        print("----------------------------", file=sys.stderr)
        sys.exit(1)


# CLI argument names that differ from configuration keys
CLI_TO_CONFIG_KEYS = {
    "schema": "schema_file",
    "archive": "archive_name",
    "timestamp": "migration_timestamp",
}


def load_config(config_path: Optional[str], cli_args: Namespace) -> ToolConfigSchema:
    """
    Loads configuration from YAML file, merges with CLI arguments,
    validates the result, and returns a validated Pydantic model instance.
    Exits with error messages if validation fails.
    """
    raw_config: Dict[str, Any] = {}

    # 1. Load from YAML file if path is provided
    if config_path:
        config_file = Path(config_path)
        if config_file.is_file():
            try:
                with open(config_file, "r", encoding="utf-8") as f:
                    yaml_config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(
                    f"Error parsing YAML file {config_path}: {e}", config_file=config_path
                ) from e
            if yaml_config and isinstance(yaml_config, dict):
                raw_config.update(yaml_config)
                logger.debug(f"Loaded configuration from {config_path}")
            elif yaml_config:
                logger.warning(
                    f"Content in config file {config_path} is not a dictionary. Ignoring file content."
                )
        else:
            logger.warning(
                f"Config file not found at {config_path}. Using defaults and CLI arguments."
            )

    # 2. Override with CLI arguments (only those explicitly provided)
    overridden_keys = set()
    for key, value in vars(cli_args).items():
        key = CLI_TO_CONFIG_KEYS.get(key, key)
        if value is not None and key in ToolConfigSchema.model_fields:
            raw_config[key] = value
            overridden_keys.add(key)
    if overridden_keys:
        logger.debug(f"Overridden config keys from CLI arguments: {sorted(overridden_keys)}")

    # 3. Validate
    logger.debug("Validating final configuration...")
    validated_config: ToolConfigSchema = validate_and_parse_config(raw_config)

    # 4. Post-validation adjustments
    validated_config.output_dir = str(Path(validated_config.output_dir).resolve())

    logger.debug("Configuration loaded and validated successfully.")
    return validated_config
