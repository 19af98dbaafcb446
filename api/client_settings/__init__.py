"""
Per-client UI settings: schema, defaults, validation and persistence.
"""
