"""Infrastructure Layer.

Adapters implementing domain ports and formatters for external consumers.
"""
