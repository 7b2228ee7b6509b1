"""Presentation layer - pages, API endpoints and HTTP concerns.

This layer contains FastAPI routers and endpoint definitions. The presentation
layer is thin - it evaluates guards, dispatches commands/queries to the
application layer and translates results to HTTP responses.

Structure:
- routers/pages/: registry-generated application pages
- routers/api/v1/: API version 1 endpoints (RESTful resources)
- routers/api/middleware/: trace middleware and auth/route-guard dependencies

The presentation layer depends on the application layer but contains NO
business logic.
"""
