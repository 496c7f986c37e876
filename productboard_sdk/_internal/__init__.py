"""Internal modules for the ProductBoard SDK.

These are not intended for direct use in application code.

Modules:
    http - httpx transport built from the client configuration
    attrs - attribute merge and lookup helpers shared by resources
"""
