import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from laravel_auto_generator.config_validation import load_config, ToolConfigSchema
from laravel_auto_generator.domain.relationships import discover_pivot_tables
from laravel_auto_generator.exceptions import LaravelAutoGeneratorError
from laravel_auto_generator.php_codegen.code_generator import CodeGenerator, parse_migration_timestamp
from laravel_auto_generator.schema_validation import load_schema

from laravel_auto_generator.colored_logging import (
    setup_colored_logging,
    get_colored_logger,
    log_success,
    log_progress,
    log_highlight,
    log_section
)

logger = get_colored_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="laravel-auto-generator",
        description="Generate Laravel migrations and Eloquent models from a schema document.",
    )
    parser.add_argument(
        "-s",
        "--schema",
        help="Path to the YAML/JSON schema document. Overrides config file setting.",
    )
    parser.add_argument(
        "-c",
        "--config",
        help="Path to the YAML configuration file.",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        help="Directory to write the generated files to. Overrides config file setting.",
    )
    parser.add_argument(
        "--archive",
        help="Bundle everything into this zip file (inside the output directory) instead of a file tree.",
    )
    parser.add_argument(
        "--timestamp",
        help="Timestamp prefix of the first migration, e.g. 2024_01_31_120000. Defaults to now.",
    )
    parser.add_argument(
        "--no-models",
        dest="generate_models",
        action="store_const",
        const=False,
        help="Skip Eloquent model classes.",
    )
    parser.add_argument(
        "--no-migrations",
        dest="generate_migrations",
        action="store_const",
        const=False,
        help="Skip create-table migrations.",
    )
    parser.add_argument(
        "--no-pivots",
        dest="generate_pivot_tables",
        action="store_const",
        const=False,
        help="Skip pivot table migrations.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose DEBUG logging for the generator tool.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output (useful for CI/CD environments).",
    )
    return parser


def run(config: ToolConfigSchema) -> int:
    """Run the generation pipeline for a validated configuration."""
    log_section(logger, "Schema")
    log_progress(logger, f"Loading schema from {config.schema_file}...")
    models = load_schema(config.schema_file)
    if not models:
        logger.warning("The schema does not define any models. Nothing to generate.")
        return 0
    log_highlight(logger, f"Found {len(models)} models: {', '.join(m.name for m in models)}")

    pivots = discover_pivot_tables(models)
    if pivots:
        log_highlight(logger, f"Discovered {len(pivots)} pivot tables: {', '.join(p.pivot_table for p in pivots)}")

    log_section(logger, "Code Generation")
    timestamp = (
        parse_migration_timestamp(config.migration_timestamp) if config.migration_timestamp else None
    )
    generator = CodeGenerator(
        models_path=config.models_path,
        migrations_path=config.migrations_path,
        migration_timestamp=timestamp,
    )
    log_progress(logger, "Generating Laravel code...")
    files = generator.generate_files(
        models,
        include_models=config.generate_models,
        include_migrations=config.generate_migrations,
        include_pivot_tables=config.generate_pivot_tables,
    )
    logger.debug(f"Generated {len(files)} files, {sum(f.code_lines for f in files)} lines")

    if config.archive_name:
        archive_path = Path(config.output_dir) / config.archive_name
        log_progress(logger, f"Bundling {len(files)} files...")
        generator.write_archive(files, str(archive_path))
        log_success(logger, f"Archive written to {archive_path}")
    else:
        log_progress(logger, f"Writing {len(files)} files to {config.output_dir}...")
        generator.write_files(files, config.output_dir)
        log_success(logger, f"Laravel code written to {config.output_dir}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    setup_colored_logging(level=log_level, use_colors=not args.no_color)
    if args.verbose:
        logger.debug("Verbose mode enabled. DEBUG level logging activated.")

    try:
        log_progress(logger, "Loading configuration...")
        config = load_config(args.config, args)
        return run(config)
    except LaravelAutoGeneratorError as e:
        logger.error(str(e), exc_info=args.verbose)
        return 1
    except Exception as e:
        logger.error(f"An unexpected error occurred during generation: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
