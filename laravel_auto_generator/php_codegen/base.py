import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    ext as jinja2_extensions,
)

from laravel_auto_generator.exceptions import CodeGenerationError

logger = logging.getLogger(__name__)

# Templates live next to the package modules
TEMPLATE_DIR = Path(__file__).parent.parent / "templates"

INDENT = "    "


def php_string(value: str) -> str:
    """Single-quoted PHP string literal."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def php_class_reference(class_name: str) -> str:
    return f"{class_name}::class"


def php_call(receiver: str, method: str, args: List[str]) -> str:
    """`$receiver->method(arg, ...)`"""
    return f"{receiver}->{method}({', '.join(args)})"


def php_array_lines(items: List[str]) -> List[str]:
    """Array items one per line, comma separated, no trailing comma."""
    return [f"{item}," for item in items[:-1]] + items[-1:]


def setup_jinja_env() -> Environment:
    """Sets up and returns the jinja2 environment for PHP templates."""
    env = Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        autoescape=False,  # PHP source, not markup
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=False,
        undefined=StrictUndefined,
        extensions=[jinja2_extensions.loopcontrols],
    )
    env.filters["php_string"] = php_string
    return env


@lru_cache(maxsize=1)
def get_jinja_env() -> Environment:
    """Shared environment; templates are compiled once per process."""
    return setup_jinja_env()


def render_template(template_name: str, context: Dict[str, Any]) -> str:
    """Render one template to a string."""
    try:
        template = get_jinja_env().get_template(template_name)
        return template.render(context)
    except TemplateError as e:
        logger.error(f"Error rendering template '{template_name}': {e}")
        raise CodeGenerationError(
            f"Could not render template '{template_name}': {e}",
            context={'template': template_name},
        ) from e
