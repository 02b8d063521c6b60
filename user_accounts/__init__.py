"""
User accounts backend: sign-up, sign-in and profile management.

Contains the FastAPI entry point (main.py), the API routes, the use-case
layer, the domain model, and the MongoDB and security adapters.
"""
