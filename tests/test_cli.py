"""
End-to-end tests for the command line entry point.
"""

import logging
import zipfile
from pathlib import Path
from unittest.mock import patch

import pytest

from laravel_auto_generator.cli import build_parser, main


@pytest.fixture(autouse=True)
def keep_pytest_log_handlers():
    """main() would replace the root handlers, which hides records from caplog."""
    with patch("laravel_auto_generator.cli.setup_colored_logging") as setup:
        yield setup


def _run(schema_file: Path, output_dir: Path, *extra: str) -> int:
    return main([
        "-s", str(schema_file),
        "-o", str(output_dir),
        "--timestamp", "2024_01_31_120000",
        "--no-color",
        *extra,
    ])


def test_parser_flags_default_to_unset():
    """The --no-* switches stay None unless passed, so config file values survive."""
    args = build_parser().parse_args(["-s", "schema.yaml"])
    assert args.generate_models is None
    assert args.generate_migrations is None
    assert args.generate_pivot_tables is None
    assert args.archive is None

    args = build_parser().parse_args(["--no-models", "--no-pivots"])
    assert args.generate_models is False
    assert args.generate_pivot_tables is False


def test_writes_file_tree(schema_file, tmp_path: Path, caplog):
    """Check the migrations and models land in the Laravel directory layout."""
    output_dir = tmp_path / "out"
    with caplog.at_level(logging.INFO):
        assert _run(schema_file, output_dir) == 0

    migrations = sorted(p.name for p in (output_dir / "database" / "migrations").iterdir())
    assert migrations == [
        "2024_01_31_120000_create_users_table.php",
        "2024_01_31_120001_create_posts_table.php",
        "2024_01_31_120002_create_roles_table.php",
        "2024_01_31_120003_create_role_user_table.php",
    ]
    models = sorted(p.name for p in (output_dir / "app" / "Models").iterdir())
    assert models == ["Post.php", "Role.php", "User.php"]
    assert "Discovered 1 pivot tables: role_user" in caplog.text


def test_writes_archive(schema_file, tmp_path: Path):
    """With --archive everything goes into one zip and no tree is written."""
    output_dir = tmp_path / "out"
    assert _run(schema_file, output_dir, "--archive", "laravel.zip") == 0

    assert not (output_dir / "app").exists()
    with zipfile.ZipFile(output_dir / "laravel.zip") as archive:
        names = archive.namelist()
    assert names[0] == "database/migrations/2024_01_31_120000_create_users_table.php"
    assert names[-1] == "app/Models/Role.php"
    assert len(names) == 7


def test_skip_models(schema_file, tmp_path: Path):
    """Test --no-models writes migrations only"""
    output_dir = tmp_path / "out"
    assert _run(schema_file, output_dir, "--no-models") == 0
    assert not (output_dir / "app").exists()
    assert len(list((output_dir / "database" / "migrations").iterdir())) == 4


def test_verbose_enables_debug(schema_file, tmp_path: Path, keep_pytest_log_handlers):
    """Test -v switches logging to DEBUG"""
    assert _run(schema_file, tmp_path / "out", "-v") == 0
    keep_pytest_log_handlers.assert_called_once_with(level=logging.DEBUG, use_colors=False)


def test_config_file_supplies_settings(schema_file, tmp_path: Path):
    """Settings come from the config file when no flags override them."""
    output_dir = tmp_path / "from_config"
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        f"schema_file: {schema_file}\n"
        f"output_dir: {output_dir}\n"
        "models_path: src/Models\n"
        "migration_timestamp: '2023_12_31_235959'\n",
        encoding="utf-8",
    )
    assert main(["-c", str(config_path), "--no-color"]) == 0
    assert (output_dir / "src" / "Models" / "User.php").is_file()
    assert (output_dir / "database" / "migrations" / "2024_01_01_000000_create_posts_table.php").is_file()


def test_missing_schema_file_fails(tmp_path: Path, caplog):
    """Test a missing schema file exits with 1 and writes nothing"""
    with caplog.at_level(logging.ERROR):
        assert _run(tmp_path / "missing.yaml", tmp_path / "out") == 1
    assert "Schema file not found" in caplog.text
    assert not (tmp_path / "out").exists()


def test_invalid_schema_fails(tmp_path: Path):
    """Test duplicate model names exit with 1"""
    schema = tmp_path / "schema.yaml"
    schema.write_text("models:\n  - name: User\n  - name: User\n", encoding="utf-8")
    assert _run(schema, tmp_path / "out") == 1


def test_empty_schema_succeeds_without_output(tmp_path: Path, caplog):
    """An empty schema is not an error, it just produces nothing."""
    schema = tmp_path / "schema.yaml"
    schema.write_text("models: []\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        assert _run(schema, tmp_path / "out") == 0
    assert "does not define any models" in caplog.text
    assert not (tmp_path / "out").exists()


def test_nothing_enabled_exits(schema_file, tmp_path: Path):
    """Test disabling every artifact kind is a configuration error"""
    with pytest.raises(SystemExit) as exc_info:
        _run(schema_file, tmp_path / "out", "--no-models", "--no-migrations", "--no-pivots")
    assert exc_info.value.code == 1
