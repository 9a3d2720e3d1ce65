"""HTTP API: FastAPI application, routers and dependencies."""
