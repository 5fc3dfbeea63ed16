"""
Custom exception hierarchy for Laravel Auto Generator.

This module provides a small exception system with rich context
and error recovery guidance for contributors and users.
"""

from typing import Dict, Any, Optional, List


class LaravelAutoGeneratorError(Exception):
    """
    Base exception for all Laravel Auto Generator errors.

    Provides rich context and error recovery guidance.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
        error_code: Optional[str] = None
    ):
        """
        Initialize the exception with context and recovery suggestions.

        Args:
            message: Human-readable error message
            context: Additional context about where/why the error occurred
            suggestions: List of potential solutions or next steps
            error_code: Unique error code for programmatic handling
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.suggestions = suggestions or []
        self.error_code = error_code

    def __str__(self) -> str:
        """Return formatted error message with context."""
        lines = [self.message]

        if self.error_code:
            lines.append(f"Error Code: {self.error_code}")

        if self.context:
            lines.append("Context:")
            for key, value in self.context.items():
                lines.append(f"  {key}: {value}")

        if self.suggestions:
            lines.append("Suggestions:")
            for suggestion in self.suggestions:
                lines.append(f"  • {suggestion}")

        return "\n".join(lines)


class ConfigurationError(LaravelAutoGeneratorError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, config_file: str = None, **kwargs):
        context = kwargs.get('context', {})
        if config_file:
            context['config_file'] = config_file

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Check the configuration file syntax",
                "Verify all required fields are present",
                "Check the README for configuration examples"
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="CONFIG_ERROR"
        )


class SchemaError(LaravelAutoGeneratorError):
    """Raised when a schema document or model violates a generator precondition."""

    def __init__(self, message: str, model: str = None, schema_file: str = None, **kwargs):
        context = kwargs.get('context', {})
        if model is not None:
            context['model'] = model
        if schema_file:
            context['schema_file'] = schema_file

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Give every model a non-empty PascalCase name",
                "Check that model names are unique",
                "Check that field and relationship ids are unique within a model"
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="SCHEMA_ERROR"
        )


class CodeGenerationError(LaravelAutoGeneratorError):
    """Raised when rendering or writing generated code fails."""

    def __init__(self, message: str, component: str = None, model: str = None, **kwargs):
        context = kwargs.get('context', {})
        if component:
            context['component'] = component  # e.g., 'migration', 'model', 'pivot_migration'
        if model:
            context['model'] = model

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Check that the output directory is writable",
                "Try generating one component at a time",
                "Check for model names that clash on a case-insensitive file system"
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="CODE_GENERATION_ERROR"
        )


def raise_schema_error(message: str, model: str = None, **kwargs):
    """Convenience function to raise schema errors."""
    raise SchemaError(message, model=model, **kwargs)
