"""Resolver package for the GraphQL schema.

Resolvers take the entity store from the execution context (see
``geoql.graphql.context``) and convert store records into GraphQL types.
"""
