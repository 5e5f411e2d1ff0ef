"""
User Accounts Service — root package.

This package contains the FastAPI app entry point (main.py), the /user API
routes, domain models and rules, and the MongoDB and local-disk infrastructure.
"""
