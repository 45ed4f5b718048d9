"""Routing — link parsing, path scheme matching, and handler dispatch.

Handlers are registered at startup; each incoming URL is parsed once into
a ``Link`` and given to the first handler that claims it.
"""
