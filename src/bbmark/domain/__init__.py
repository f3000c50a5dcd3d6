"""Domain layer — rule table, transformation engine, tag catalog.

This layer depends only on stdlib.
It must never import from services, commands, output, or config.
"""
