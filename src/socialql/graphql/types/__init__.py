"""GraphQL output types."""
