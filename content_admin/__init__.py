"""Content admin: facade over schema metadata and a GraphQL content endpoint."""
