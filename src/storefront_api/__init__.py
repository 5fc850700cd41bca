"""FastAPI application for the storefront checkout server."""
