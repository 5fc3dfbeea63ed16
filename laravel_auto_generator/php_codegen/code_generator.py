"""
Laravel project code generator.

This module lays generated migrations and model classes out the way a
Laravel application expects them, and writes them either as a directory
tree or as a single zip archive.
"""

import logging
import zipfile
from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from pathlib import Path, PurePosixPath
from typing import Dict, List, Optional, Sequence, Type

from laravel_auto_generator.constants import ArtifactKinds, DefaultConfig
from laravel_auto_generator.domain.models import GeneratedFile, Model, PivotDescriptor
from laravel_auto_generator.domain.naming import migration_name, table_name
from laravel_auto_generator.domain.relationships import discover_pivot_tables
from laravel_auto_generator.exceptions import CodeGenerationError
from laravel_auto_generator.php_codegen.migrations import generate_pivot_table_code, generate_table_migration
from laravel_auto_generator.php_codegen.models import generate_model_code

logger = logging.getLogger(__name__)

ZIP_EPOCH = (1980, 1, 1, 0, 0, 0)

# ---- Design Patterns ----

# Strategy Pattern for the different artifacts
class CodeGeneratorStrategy(ABC):
    """Abstract Strategy for code generation"""

    @abstractmethod
    def generate_code(self, subject, **kwargs) -> str:
        """Generate the source text for one model or pivot descriptor."""


class TableMigrationGenerator(CodeGeneratorStrategy):
    """Generates create-table migrations"""
    def generate_code(self, subject: Model, **kwargs) -> str:
        return generate_table_migration(subject)


class ModelClassGenerator(CodeGeneratorStrategy):
    """Generates Eloquent model classes"""
    def generate_code(self, subject: Model, **kwargs) -> str:
        return generate_model_code(subject, kwargs.get('all_models'))


class PivotMigrationGenerator(CodeGeneratorStrategy):
    """Generates pivot table migrations"""
    def generate_code(self, subject: PivotDescriptor, **kwargs) -> str:
        return generate_pivot_table_code(subject)


# Factory Pattern for creating generators
class CodeGeneratorFactory:
    """Factory for creating code generator strategies"""

    _registry: Dict[str, Type[CodeGeneratorStrategy]] = {
        ArtifactKinds.MIGRATION: TableMigrationGenerator,
        ArtifactKinds.MODEL: ModelClassGenerator,
        ArtifactKinds.PIVOT_MIGRATION: PivotMigrationGenerator,
    }

    @classmethod
    def register(cls, name: str, generator_class: Type[CodeGeneratorStrategy]) -> None:
        """Register a new generator strategy"""
        cls._registry[name] = generator_class

    @classmethod
    def create(cls, name: str) -> CodeGeneratorStrategy:
        """Create a generator strategy instance by name"""
        generator_class = cls._registry.get(name)
        if not generator_class:
            raise ValueError(f"Unknown generator type: {name}")
        return generator_class()


def parse_migration_timestamp(value: str) -> datetime:
    """Parse a `YYYY_MM_DD_HHMMSS` migration prefix."""
    return datetime.strptime(value, DefaultConfig.MIGRATION_TIMESTAMP_FORMAT)


# Facade Pattern for simplified interface
class CodeGenerator:
    """Facade for the code generation system"""

    def __init__(
        self,
        models_path: str = DefaultConfig.MODELS_PATH,
        migrations_path: str = DefaultConfig.MIGRATIONS_PATH,
        migration_timestamp: Optional[datetime] = None,
    ):
        self.models_path = PurePosixPath(models_path)
        self.migrations_path = PurePosixPath(migrations_path)
        # Fixed per generator so repeated runs over the same schema are identical
        self.migration_timestamp = migration_timestamp or datetime.now().replace(microsecond=0)

    def _migration_path(self, sequence: int, table: str) -> str:
        stamp = (self.migration_timestamp + timedelta(seconds=sequence)).strftime(
            DefaultConfig.MIGRATION_TIMESTAMP_FORMAT
        )
        return str(self.migrations_path / f"{stamp}_{migration_name(table)}.php")

    def _model_path(self, model: Model) -> str:
        return str(self.models_path / f"{model.name}.php")

    def generate_file(self, kind: str, subject, path: str, source: str, **kwargs) -> GeneratedFile:
        """Generate one file using a specific generator strategy"""
        generator = CodeGeneratorFactory.create(kind)
        code = generator.generate_code(subject, **kwargs)
        logger.debug(f"Generated {kind}: {path}")
        return GeneratedFile(path=path, content=code, kind=kind, source=source)

    def generate_files(
        self,
        models: Sequence[Model],
        include_models: bool = True,
        include_migrations: bool = True,
        include_pivot_tables: bool = True,
    ) -> List[GeneratedFile]:
        """
        Generate all artifacts of a schema.

        Table migrations come first (in model order) followed by pivot
        migrations, each one second apart, so Laravel runs them in the order
        they were emitted and pivot tables are created after the tables
        they reference. Model classes follow.
        """
        files: List[GeneratedFile] = []
        sequence = 0

        if include_migrations:
            for model in models:
                table = table_name(model)
                files.append(self.generate_file(
                    ArtifactKinds.MIGRATION, model, self._migration_path(sequence, table), model.name
                ))
                sequence += 1

        if include_pivot_tables:
            for pivot in discover_pivot_tables(models):
                files.append(self.generate_file(
                    ArtifactKinds.PIVOT_MIGRATION,
                    pivot,
                    self._migration_path(sequence, pivot.pivot_table),
                    pivot.pivot_table,
                ))
                sequence += 1

        if include_models:
            for model in models:
                files.append(self.generate_file(
                    ArtifactKinds.MODEL, model, self._model_path(model), model.name, all_models=models
                ))

        return files

    @staticmethod
    def _check_unique_paths(files: Sequence[GeneratedFile]) -> None:
        seen = set()
        for generated in files:
            key = generated.path.lower()
            if key in seen:
                raise CodeGenerationError(
                    f"Two generated files share the path '{generated.path}'",
                    component=generated.kind,
                    model=generated.source,
                )
            seen.add(key)

    def write_files(self, files: Sequence[GeneratedFile], output_dir: str) -> List[Path]:
        """Write files below `output_dir`, creating directories as needed."""
        self._check_unique_paths(files)
        root = Path(output_dir)
        written = []
        for generated in files:
            output_path = root / generated.path
            try:
                output_path.parent.mkdir(parents=True, exist_ok=True)
                with open(output_path, 'w', encoding='utf-8') as f:
                    f.write(generated.content + "\n")
            except OSError as e:
                logger.error(f"Error writing file '{output_path}': {e}")
                raise CodeGenerationError(
                    f"Could not write '{output_path}': {e}",
                    component=generated.kind,
                    model=generated.source,
                ) from e
            logger.info(f"Generated file: {output_path}")
            written.append(output_path)
        return written

    def write_archive(self, files: Sequence[GeneratedFile], archive_path: str) -> Path:
        """Bundle files into one zip archive, members in generation order."""
        self._check_unique_paths(files)
        path = Path(archive_path)
        # zip entries cannot be dated before 1980
        date_time = max(tuple(self.migration_timestamp.timetuple()[:6]), ZIP_EPOCH)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with zipfile.ZipFile(path, 'w', compression=zipfile.ZIP_DEFLATED) as archive:
                for generated in files:
                    info = zipfile.ZipInfo(generated.path, date_time=date_time)
                    info.compress_type = zipfile.ZIP_DEFLATED
                    archive.writestr(info, generated.content + "\n")
        except OSError as e:
            logger.error(f"Error writing archive '{path}': {e}")
            raise CodeGenerationError(f"Could not write archive '{path}': {e}") from e
        logger.info(f"Bundled {len(files)} files into {path}")
        return path
