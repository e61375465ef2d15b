"""
Core utilities and constants for the sample API.

Shared constants live in ``core.constants``; error translation lives in
``core.error_handlers``.
"""
