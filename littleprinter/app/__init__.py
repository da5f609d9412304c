"""Application composition layer for printer client runtimes.

Modules here wire the REST adapter and use cases together and define where
completion callbacks run, without placing business logic in views.
"""
