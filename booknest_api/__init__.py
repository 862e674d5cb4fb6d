"""
Top-level package for the BookNest API.

This file makes ``booknest_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``booknest_api.app.main``.  All functionality lives in submodules
under ``app``.
"""
