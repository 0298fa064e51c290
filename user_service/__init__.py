"""
User Service root package.

This package contains the FastAPI app factory (main.py), the HTTP listener
(server.py), the command line entry point (cli.py), API routes, use cases,
domain model and the SQL repository.
"""
