"""Resolver package for the GraphQL schema.

Query resolvers open a session, eagerly load direct relations and prime the
request's loaders. Field resolvers go through those loaders.
"""
