# numbergate/api/__init__.py
"""HTTP layer: FastAPI app, routes, models and the origin gate."""
