"""
HTTP API for the movie review service.
"""
