"""
GraphQL schema, types, and resolvers
"""
