"""
Store backend application — root package.

This package contains the FastAPI app entry point (main.py), API routes,
use cases and DTOs, domain models and repository interfaces, and the
MongoDB infrastructure behind them.
"""
