"""FastAPI host for the render package."""
