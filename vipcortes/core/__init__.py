"""
Core utilities shared across the VipCortes API.

This package hosts configuration, logging setup, password hashing and the
per-IP rate limiter used by the auth endpoints.
"""
