import io
import logging
import unittest

from laravel_auto_generator.colored_logging import ColoredFormatter, log_section, log_success
from laravel_auto_generator.exceptions import (
    CodeGenerationError,
    ConfigurationError,
    LaravelAutoGeneratorError,
    SchemaError,
    raise_schema_error,
)


class TestExceptions(unittest.TestCase):

    def test_str_includes_code_context_and_suggestions(self):
        """Test str includes code context and suggestions"""
        error = SchemaError("Model name is empty", model="", schema_file="schema.yaml")
        text = str(error)
        self.assertTrue(text.startswith("Model name is empty\nError Code: SCHEMA_ERROR"))
        self.assertIn("  model: ", text)
        self.assertIn("  schema_file: schema.yaml", text)
        self.assertIn("Suggestions:", text)

    def test_custom_suggestions_replace_defaults(self):
        """Test custom suggestions replace defaults"""
        error = CodeGenerationError("boom", component="model", model="User", suggestions=["Retry"])
        self.assertEqual(error.suggestions, ["Retry"])
        self.assertEqual(error.context, {"component": "model", "model": "User"})
        self.assertEqual(error.error_code, "CODE_GENERATION_ERROR")

    def test_hierarchy(self):
        """Test every error derives from the base error"""
        for cls in (ConfigurationError, SchemaError, CodeGenerationError):
            self.assertTrue(issubclass(cls, LaravelAutoGeneratorError))

    def test_raise_schema_error(self):
        """Test raise schema error"""
        with self.assertRaises(SchemaError) as ctx:
            raise_schema_error("bad", model="Post", context={"model_id": "3"})
        self.assertEqual(ctx.exception.context, {"model_id": "3", "model": "Post"})


class TestColoredFormatter(unittest.TestCase):

    def _record(self, level, message):
        return logging.LogRecord("test", level, __file__, 1, message, None, None)

    def test_plain_when_stream_is_not_a_tty(self):
        """Test plain when stream is not a tty"""
        formatter = ColoredFormatter(use_colors=True, stream=io.StringIO())
        self.assertEqual(formatter.format(self._record(logging.ERROR, "failed")), "ERROR: failed")

    def test_colors_by_level_and_content(self):
        """Test colors by level and content"""
        class FakeTTY(io.StringIO):
            def isatty(self):
                return True

        formatter = ColoredFormatter(use_colors=True, stream=FakeTTY())
        error = formatter.format(self._record(logging.ERROR, "failed"))
        self.assertEqual(error, f"{ColoredFormatter.COLORS['ERROR']}ERROR: failed{ColoredFormatter.RESET}")
        success = formatter.format(self._record(logging.INFO, "✓ Archive written"))
        self.assertTrue(success.startswith(ColoredFormatter.SPECIAL_COLORS['success']))


def test_log_helpers(caplog):
    """Test the log helper prefixes and section banner"""
    logger = logging.getLogger("laravel_auto_generator.test")
    with caplog.at_level(logging.INFO, logger="laravel_auto_generator.test"):
        log_success(logger, "done")
        log_section(logger, "Schema")
    assert caplog.messages == ["✓ done", "=" * 60, "  SCHEMA", "=" * 60]
