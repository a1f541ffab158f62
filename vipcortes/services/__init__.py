"""
High-level use cases for the VipCortes API.

Each service wraps the record store(s) it needs with the validation,
defaulting and lookup rules of its entity. Routers call these services and
never touch a store directly.
"""
