"""HTTP API: FastAPI app, routers, dependencies and middleware."""
