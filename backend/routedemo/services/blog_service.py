"""
RouteDemo Backend — Blog Service
=================================

What:  Renders the simulated blog: the post listing and single-post pages.
Why:   Shows how a route with a constrained placeholder ({id}) looks data up
       and reports a missing resource.
How:   Reads the read-only Fixtures passed in by the route; returns HTML
       Replies, or a NOT_FOUND Failure for unknown ids.
"""

import logging
from html import escape

from routedemo.fixtures import Fixtures
from routedemo.outcomes import Failure, Outcome, Reply

logger = logging.getLogger(__name__)


class BlogService:
    """Stateless; every call receives the fixtures it reads from."""

    def list_posts(self, fixtures: Fixtures) -> Reply:
        """
        One link per post, in insertion order:

            <a href="/blog/show/1">Using Silex</a><br />
        """
        output = ""
        for post_id, post in fixtures.iter_posts():
            output += f'<a href="/blog/show/{post_id}">{escape(post.title)}</a>'
            output += "<br />\n"
        return Reply.html(output)

    def show_post(self, fixtures: Fixtures, post_id: str) -> Outcome:
        """
        `post_id` is the raw path segment. Only the canonical spelling of a
        post id finds it: "1" does, "01" is a miss like any unknown id.
        """
        post = None
        if post_id.isdecimal() and str(int(post_id)) == post_id:
            post = fixtures.blog_posts.get(int(post_id))
        if post is None:
            logger.debug("Blog post %s requested but not present", post_id)
            return Failure.not_found(f"Post {post_id} does not exist.", post_id=post_id)

        return Reply.html(f"<h1>{escape(post.title)}</h1>\n<p>{escape(post.body)}</p>")


blog_service = BlogService()
