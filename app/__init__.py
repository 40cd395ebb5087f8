"""
HTTP API for the quick input service.
"""
