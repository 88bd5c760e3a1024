"""Resolver package for GraphQL schema.

Each module implements the operations referenced by the root query and
mutation types against the `Database` carried in the GraphQL context.
"""

# Intentionally empty; functions are defined in sibling modules.
