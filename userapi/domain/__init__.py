"""
Domain layer package.

Contains entities, the store query vocabulary, port interfaces and
errors. No framework imports, no IO, no side effects.
"""
