"""
RouteDemo Backend — Configuration, Fixtures, Context & Routing Tests
=====================================================================

What:  Tests for the pieces the app factory is assembled from.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError
from starlette.convertors import CONVERTOR_TYPES

from routedemo.config import Settings
from routedemo.context import RequestContext
from routedemo.fixtures import BlogPost, Fixtures, default_fixtures
from routedemo.routing import ALPHA, DIGITS, register_constraint


class TestSettings:

    def test_defaults(self, monkeypatch):
        for var in ("DEBUG", "STORAGE_ROOT", "LOG_LEVEL"):
            monkeypatch.delenv(var, raising=False)
        settings = Settings(_env_file=None)
        assert settings.debug is False
        assert settings.storage_root == "./files"
        assert settings.log_level == "INFO"

    def test_debug_from_environment(self, monkeypatch):
        monkeypatch.setenv("DEBUG", "true")
        assert Settings(_env_file=None).debug is True

    def test_log_level_is_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(PydanticValidationError, match="Invalid log_level"):
            Settings(log_level="chatty")

    def test_empty_storage_root_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(storage_root="  ")

    def test_cors_origins_list(self):
        settings = Settings(cors_origins="http://a.test, http://b.test,")
        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_settings_are_frozen(self):
        settings = Settings()
        with pytest.raises(PydanticValidationError):
            settings.debug = True


class TestFixtures:

    def test_default_fixtures(self):
        fixtures = default_fixtures()
        assert list(fixtures.blog_posts) == [1]
        assert fixtures.blog_posts[1].title == "Using Silex"
        assert fixtures.blog_posts[1].date == "2011-03-29"
        assert fixtures.sample_user.name == "John"

    def test_blog_posts_are_read_only(self):
        fixtures = default_fixtures()
        with pytest.raises(TypeError):
            fixtures.blog_posts[2] = fixtures.blog_posts[1]

    def test_attributes_cannot_be_replaced(self):
        fixtures = default_fixtures()
        with pytest.raises(AttributeError):
            fixtures._sample_user = None

    def test_source_mapping_changes_do_not_leak(self):
        posts = {1: BlogPost(date="2024-01-01", author="a", title="t", body="b")}
        fixtures = Fixtures(blog_posts=posts)
        posts[2] = posts[1]
        assert list(fixtures.blog_posts) == [1]

    def test_non_positive_ids_rejected(self):
        with pytest.raises(ValueError, match="positive"):
            Fixtures(blog_posts={0: BlogPost(date="d", author="a", title="t", body="b")})

    def test_blog_post_is_frozen(self):
        post = BlogPost(date="d", author="a", title="t", body="b")
        with pytest.raises(PydanticValidationError):
            post.title = "changed"


class TestRequestContext:

    def test_lookup_order(self):
        context = RequestContext(
            method="POST",
            path="/feedback",
            path_params={"message": "path"},
            query={"message": "query"},
            form={"message": "form"},
        )
        assert context.get("message") == "path"

    def test_query_before_form(self):
        context = RequestContext(
            method="POST", path="/feedback", query={"message": "query"}, form={"message": "form"}
        )
        assert context.get("message") == "query"

    def test_default_when_missing(self):
        context = RequestContext(method="GET", path="/")
        assert context.get("message") is None
        assert context.get("message", "fallback") == "fallback"

    def test_header_lookup_is_case_insensitive(self):
        context = RequestContext(method="POST", path="/push", headers={"name": "a.txt"})
        assert context.header("Name") == "a.txt"
        assert context.header("missing") is None


class TestConstraints:

    def test_alpha_registered(self):
        assert ALPHA == "alpha"
        assert CONVERTOR_TYPES["alpha"].regex == "[A-Za-z]+"

    def test_digits_keep_raw_segment(self):
        assert DIGITS == "digits"
        convertor = CONVERTOR_TYPES["digits"]
        assert convertor.regex == "[0-9]+"
        assert convertor.convert("007") == "007"

    def test_reregistering_same_pattern_is_noop(self):
        assert register_constraint("alpha", "[A-Za-z]+") == "alpha"

    def test_conflicting_pattern_rejected(self):
        with pytest.raises(ValueError, match="already registered"):
            register_constraint("alpha", "[a-z]+")

    def test_malformed_pattern_rejected(self):
        import re

        with pytest.raises(re.error):
            register_constraint("broken", "[a-z")
