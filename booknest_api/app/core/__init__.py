"""
Cross-cutting infrastructure: settings, logging, exceptions and
FastAPI dependencies.
"""
