"""Resolver package for GraphQL schema.

Resolvers read and write the ``EntityStore`` found in the GraphQL context
and return GraphQL output types. Root query and mutation fields import them
lazily to keep type modules free of import cycles.
"""
