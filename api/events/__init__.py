"""
Read-only, cursor-paginated listings of events and their tickets.
"""
