"""
Utility functions used to decode human-facing transaction parameters.
"""
