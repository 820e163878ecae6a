"""
Core catalog logic: loading, lookup, search and review lookups.
"""
