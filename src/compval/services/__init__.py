"""Service layer — rule evaluation returning ServiceResult.

Services may import from rules, domain, and config.
They must never import from commands or output.
"""
