"""View lookup — map request paths onto template files."""
