"""
Tests for the naming conventions (table, foreign key, pivot and migration names).
"""

from unittest import TestCase

from laravel_auto_generator.domain.models import Model
from laravel_auto_generator.domain.naming import (
    accessor_name,
    class_name,
    default_foreign_key,
    default_pivot_table,
    migration_name,
    pluralize,
    require_model_name,
    table_name,
    to_snake_case,
)
from laravel_auto_generator.exceptions import SchemaError


class TestTableName(TestCase):
    """Test cases for table_name"""

    def test_default_table_name_is_lowercase_plural(self):
        """Test default table name is lowercase plural"""
        assert table_name(Model(name="Post")) == "posts"

    def test_pluralization_is_naive(self):
        """Irregular plurals are not handled: Category -> categorys"""
        assert table_name(Model(name="Category")) == "categorys"
        assert table_name(Model(name="Person")) == "persons"

    def test_multi_word_model_is_only_lowercased(self):
        """Test multi word model is only lowercased"""
        assert table_name(Model(name="BlogPost")) == "blogposts"

    def test_explicit_table_name_wins(self):
        """Test explicit table name wins"""
        assert table_name(Model(name="Post", table_name="articles")) == "articles"

    def test_empty_explicit_table_name_falls_back_to_convention(self):
        """Test empty explicit table name falls back to convention"""
        assert table_name(Model(name="Post", table_name="")) == "posts"

    def test_blank_explicit_table_name_falls_back_to_convention(self):
        """Test blank explicit table name falls back to convention"""
        assert table_name(Model(name="Post", table_name="   ")) == "posts"

    def test_empty_model_name_fails_fast(self):
        """Test empty model name fails fast"""
        with self.assertRaises(SchemaError) as ctx:
            table_name(Model(name=""))
        assert "non-empty" in str(ctx.exception)
        assert ctx.exception.error_code == "SCHEMA_ERROR"


class TestRequireModelName(TestCase):
    """Test cases for require_model_name"""

    def test_returns_name(self):
        """Test a valid model name is returned unchanged"""
        assert require_model_name(Model(name="User")) == "User"

    def test_blank_name_raises_with_model_id_context(self):
        """Test blank name raises with model id context"""
        with self.assertRaises(SchemaError) as ctx:
            require_model_name(Model(name="   ", id="42"))
        assert ctx.exception.context["model_id"] == "42"


class TestForeignAndPivotNames(TestCase):
    """Test cases for default_foreign_key and default_pivot_table"""

    def test_default_foreign_key(self):
        """Test default foreign key"""
        assert default_foreign_key("User") == "user_id"
        assert default_foreign_key("BlogPost") == "blogpost_id"

    def test_default_pivot_table_sorts_names(self):
        """Test default pivot table sorts names"""
        assert default_pivot_table("User", "Role") == "role_user"
        assert default_pivot_table("Role", "User") == "role_user"

    def test_default_pivot_table_lowercases_before_sorting(self):
        """Test default pivot table lowercases before sorting"""
        assert default_pivot_table("tag", "Post") == "post_tag"

    def test_self_referencing_pivot(self):
        """Test self referencing pivot"""
        assert default_pivot_table("User", "User") == "user_user"


class TestClassAndMigrationNames(TestCase):
    """Test cases for class_name and migration_name"""

    def test_class_name_single_segment(self):
        """Test class name single segment"""
        assert class_name("posts") == "CreatePostsTable"

    def test_class_name_capitalizes_each_segment(self):
        """Test class name capitalizes each segment"""
        assert class_name("role_user") == "CreateRoleUserTable"

    def test_class_name_keeps_rest_of_segment(self):
        """Test class name keeps rest of segment"""
        assert class_name("blog_postTags") == "CreateBlogPostTagsTable"

    def test_migration_name(self):
        """Test building migration file stems"""
        assert migration_name("posts") == "create_posts_table"
        assert migration_name("role_user") == "create_role_user_table"

    def test_migration_stem_uses_lowercased_table_name(self):
        """Test migration stems are built from the lowercased table name"""
        assert migration_name("user_roles_2fa") == "create_user_roles_2fa_table"
        assert migration_name("blog_postTags") == "create_blog_posttags_table"

    def test_to_snake_case(self):
        """Test to snake case"""
        assert to_snake_case("UserAccount") == "user_account"
        assert to_snake_case("XMLHttpRequest") == "xml_http_request"


class TestAccessorName(TestCase):
    """Test cases for pluralize and accessor_name"""

    def test_pluralize(self):
        """Test pluralize appends s"""
        assert pluralize("post") == "posts"
        assert pluralize("category") == "categorys"

    def test_singular_accessor(self):
        """Test singular accessor is the lowercased model name"""
        assert accessor_name("User") == "user"

    def test_plural_accessor(self):
        """Test plural accessor is naively pluralized"""
        assert accessor_name("Category", plural=True) == "categorys"
