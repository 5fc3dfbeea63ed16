# File: tests/conftest.py
# Shared pytest fixtures: a small blog schema as domain models and as a document on disk.

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

import pytest
import yaml

from laravel_auto_generator.domain.models import Field, Model, Relationship


BLOG_SCHEMA: Dict[str, Any] = {
    "models": [
        {
            "id": "1",
            "name": "User",
            "timestamps": True,
            "softDeletes": False,
            "fields": [
                {"id": "f1", "name": "name", "type": "string", "length": "100"},
                {"id": "f2", "name": "email", "type": "string", "length": "255", "unique": True},
            ],
            "relationships": [
                {"id": "r1", "type": "hasMany", "relatedModel": "Post"},
                {"id": "r2", "type": "belongsToMany", "relatedModel": "Role"},
            ],
        },
        {
            "id": "2",
            "name": "Post",
            "timestamps": True,
            "softDeletes": True,
            "fields": [
                {"id": "f1", "name": "title", "type": "string", "length": "255"},
                {"id": "f2", "name": "body", "type": "text", "nullable": True},
            ],
            "relationships": [
                {"id": "r1", "type": "belongsTo", "relatedModel": "User"},
            ],
        },
        {
            "id": "3",
            "name": "Role",
            "tableName": "",
            "timestamps": False,
            "softDeletes": False,
            "fields": [
                {"id": "f1", "name": "label", "type": "string", "length": ""},
            ],
            "relationships": [
                {"id": "r1", "type": "belongsToMany", "relatedModel": "User", "pivotTable": "user_roles"},
            ],
        },
    ]
}


@pytest.fixture
def blog_schema() -> Dict[str, Any]:
    return yaml.safe_load(yaml.safe_dump(BLOG_SCHEMA))


@pytest.fixture
def blog_models() -> List[Model]:
    """The blog schema as domain models."""
    user = Model(
        id="1",
        name="User",
        fields=(
            Field(id="f1", name="name", type="string", length="100"),
            Field(id="f2", name="email", type="string", length="255", unique=True),
        ),
        relationships=(
            Relationship(id="r1", type="hasMany", related_model="Post"),
            Relationship(id="r2", type="belongsToMany", related_model="Role"),
        ),
    )
    post = Model(
        id="2",
        name="Post",
        soft_deletes=True,
        fields=(
            Field(id="f1", name="title", type="string", length="255"),
            Field(id="f2", name="body", type="text", nullable=True),
        ),
        relationships=(
            Relationship(id="r1", type="belongsTo", related_model="User"),
        ),
    )
    role = Model(
        id="3",
        name="Role",
        timestamps=False,
        fields=(Field(id="f1", name="label", type="string"),),
        relationships=(
            Relationship(id="r1", type="belongsToMany", related_model="User", pivot_table="user_roles"),
        ),
    )
    return [user, post, role]


@pytest.fixture
def schema_file(tmp_path: Path, blog_schema: Dict[str, Any]) -> Path:
    """The blog schema written as YAML."""
    path = tmp_path / "schema.yaml"
    path.write_text(yaml.safe_dump(blog_schema, sort_keys=False), encoding="utf-8")
    return path


@pytest.fixture
def fixed_timestamp() -> datetime:
    return datetime(2024, 1, 31, 12, 0, 0)
