"""Adapter package for external I/O implementations.

Purpose:
    Collect the concrete printer transport (HTTP sessions, delivery channels),
    the message builder and the response classifier used by use cases.

Dependencies:
    Individual submodules depend on ``requests``, ``Pillow`` and the domain
    definitions in ``littleprinter.domain``.

Call context:
    Imported by app composition modules (for runtime wiring) and by tests (for
    transport-level behavior verification with stub sessions).
"""
