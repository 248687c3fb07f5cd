"""
Movie Review API Application Package.

This package contains the application logic for the movie and review
service, including database models, services, the HTTP API, and utilities.
"""

__version__ = "1.0.0"
