"""
Service layer for business logic.

This package contains the service class that validates quick input,
runs the parser and stores the resulting transactions.
"""
