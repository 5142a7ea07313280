"""Rule layer — LessThan and Identical on top of ComparisonRule.

Rules may import from domain and errors.
They must never import from services, commands, output, or config.
"""
