"""Internal implementation details for Calendra.

This package is not part of the public API.
"""
