"""Admin and contact workflows built on the query client."""
