"""
GraphQL schema and resolvers for SocialQL
"""
