"""Domain layer — error codes, coercion rules, and token resolution.

This layer depends only on stdlib and compval.errors.
It must never import from rules, services, commands, or config.
"""
