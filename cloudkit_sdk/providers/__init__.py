"""
Provider adapters.
"""
