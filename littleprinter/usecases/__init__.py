"""Use-case layer for printer workflows.

Each module coordinates domain objects and ports without performing transport
I/O directly, so presentation code never talks to the adapter itself.
"""
