"""Internal modules for Ivko SDK.

WARNING: This package contains system-level modules used by IvkoClient.
These are not intended for direct use in application code.

Modules:
    dispatch - Request execution, work queue and response classification
    http - Shared HTTP client configuration
"""
