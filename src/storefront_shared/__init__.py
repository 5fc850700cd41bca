"""Shared models, services and utilities for the storefront checkout server."""
