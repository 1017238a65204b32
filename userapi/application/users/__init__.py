"""
Application layer for the users context.

One use case per endpoint. Each one issues exactly one store call and
turns the outcome into a response projection or a domain error.
"""
