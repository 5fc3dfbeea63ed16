"""
Laravel PHP Code Generator Module

This module renders Laravel migrations and Eloquent model classes from
schema models using jinja2 templates.
"""

from .migrations import generate_table_migration, generate_pivot_table_code
from .models import generate_model_code
from .relationships import generate_relationship_method, RELATIONSHIP_RULES
from .code_generator import CodeGenerator, CodeGeneratorFactory


__all__ = [
    'generate_table_migration',
    'generate_pivot_table_code',
    'generate_model_code',
    'generate_relationship_method',
    'RELATIONSHIP_RULES',
    'CodeGenerator',
    'CodeGeneratorFactory',
]
