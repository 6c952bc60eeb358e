# Routes package init
"""
RouteDemo Backend — Routes Package
===================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - greetings.py: GET  /                    (static greeting)
                    GET  /hello/{name}        (name: letters only)
    - blog.py:      GET  /blog                (post listing)
                    GET  /blog/show/{id}      (id: digits only)
    - feedback.py:  POST /feedback            (form field `message`)
    - users.py:     GET  /users.json/{id}     (id: digits only)
    - files.py:     POST /upload              (multipart field `upload`)
                    POST /push                (raw body, `name` header)
    - health.py:    GET  /health              (service health check)

Design Principle:
    Routes are THIN: they gather what the service needs (fixtures, a
    RequestContext, the FileService), call it, and pass the outcome to
    routedemo.rendering.render_outcome.
"""
