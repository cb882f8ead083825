"""API layer - FastAPI routers, middleware and dependencies."""
