import logging
from typing import List, Optional, Sequence

from laravel_auto_generator.constants import LaravelNames, TemplateNames
from laravel_auto_generator.domain.models import Model
from laravel_auto_generator.domain.naming import require_model_name
from laravel_auto_generator.php_codegen.base import php_array_lines, php_string, render_template
from laravel_auto_generator.php_codegen.relationships import generate_relationship_methods

logger = logging.getLogger(__name__)

BASE_IMPORTS = [
    "Illuminate\\Database\\Eloquent\\Factories\\HasFactory",
    "Illuminate\\Database\\Eloquent\\Model",
]
SOFT_DELETES_IMPORT = "Illuminate\\Database\\Eloquent\\SoftDeletes"


def build_model_imports(model: Model) -> List[str]:
    imports = list(BASE_IMPORTS)
    if model.soft_deletes:
        imports.append(SOFT_DELETES_IMPORT)
    return imports


def build_model_traits(model: Model) -> List[str]:
    traits = list(LaravelNames.BASE_TRAITS)
    if model.soft_deletes:
        traits.append(LaravelNames.SOFT_DELETES_TRAIT)
    return traits


def generate_model_code(model: Model, all_models: Optional[Sequence[Model]] = None) -> str:
    """
    Eloquent model class for one model.

    `all_models` is accepted for call-site symmetry only: relationship
    targets are addressed by name and are not looked up or checked.

    Raises:
        SchemaError: If the model has no name
    """
    require_model_name(model)
    logger.debug(f"Rendering model class {model.name}")
    return render_template(TemplateNames.MODEL, {
        "namespace": LaravelNames.MODEL_NAMESPACE,
        "imports": build_model_imports(model),
        "class_name": model.name,
        "traits": build_model_traits(model),
        "table_name": model.table_name,
        "timestamps": model.timestamps,
        "fillable_lines": php_array_lines([php_string(name) for name in model.fillable]),
        "relationship_methods": generate_relationship_methods(model),
    })
