"""
RouteDemo Backend — Service Unit Tests
=======================================

What:  Tests for BlogService, FeedbackService and UserService without HTTP.
Why:   Services return plain Reply / Failure values, so they can be checked
       directly against fixtures built in the test.
"""

from routedemo.fixtures import BlogPost, Fixtures, User, default_fixtures
from routedemo.outcomes import ErrorKind, Failure, MediaType, Reply
from routedemo.services.blog_service import BlogService
from routedemo.services.feedback_service import THANK_YOU, FeedbackService
from routedemo.services.user_service import UserService


class TestBlogService:

    def setup_method(self):
        self.service = BlogService()
        self.fixtures = default_fixtures()

    def test_list_posts_links_each_post(self):
        reply = self.service.list_posts(self.fixtures)
        assert reply.media_type is MediaType.HTML
        assert reply.body == '<a href="/blog/show/1">Using Silex</a><br />\n'

    def test_list_posts_empty(self):
        assert self.service.list_posts(Fixtures()).body == ""

    def test_show_existing_post(self):
        outcome = self.service.show_post(self.fixtures, "1")
        assert isinstance(outcome, Reply)
        assert outcome.status_code == 200
        assert "<h1>Using Silex</h1>" in outcome.body

    def test_show_missing_post(self):
        outcome = self.service.show_post(self.fixtures, "999")
        assert isinstance(outcome, Failure)
        assert outcome.kind is ErrorKind.NOT_FOUND
        assert outcome.status_code == 404
        assert outcome.message == "Post 999 does not exist."

    def test_leading_zero_is_not_the_same_post(self):
        outcome = self.service.show_post(self.fixtures, "01")
        assert isinstance(outcome, Failure)
        assert outcome.status_code == 404
        assert outcome.message == "Post 01 does not exist."

    def test_titles_are_escaped(self):
        fixtures = Fixtures(
            blog_posts={2: BlogPost(date="2024-01-01", author="x", title="<b>Hi</b>", body="a & b")}
        )
        outcome = self.service.show_post(fixtures, "2")
        assert outcome.body == "<h1>&lt;b&gt;Hi&lt;/b&gt;</h1>\n<p>a &amp; b</p>"


class TestFeedbackService:

    def setup_method(self):
        self.service = FeedbackService()

    def test_message_accepted_with_201(self):
        outcome = self.service.submit("hi")
        assert isinstance(outcome, Reply)
        assert outcome.status_code == 201
        assert outcome.body == THANK_YOU

    def test_empty_message_is_internal_error(self):
        for message in (None, "", "0"):
            outcome = self.service.submit(message)
            assert isinstance(outcome, Failure)
            assert outcome.kind is ErrorKind.INTERNAL_ERROR
            assert outcome.status_code == 500

    def test_whitespace_message_is_accepted(self):
        assert self.service.submit(" ").status_code == 201


class TestUserService:

    def setup_method(self):
        self.service = UserService()

    def test_sample_user_for_any_id(self):
        fixtures = default_fixtures()
        for user_id in ("1", "2", "999", "007"):
            reply = self.service.lookup(fixtures, user_id)
            assert reply.status_code == 200
            assert reply.body == {"name": "John", "surname": "Jim"}

    def test_custom_sample_user(self):
        reply = self.service.lookup(Fixtures(sample_user=User(name="Ada", surname="L")), "1")
        assert reply.body == {"name": "Ada", "surname": "L"}

    def test_no_sample_user(self):
        reply = self.service.lookup(Fixtures(), "1")
        assert reply.status_code == 404
        assert reply.media_type is MediaType.JSON
        assert reply.body == {"message": "The user was not found."}
