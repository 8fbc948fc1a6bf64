"""Resolver functions referenced by the GraphQL types, queries, and mutations.

Resolvers delegate to the data client found in the request context.
"""
