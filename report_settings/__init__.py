"""Report settings loader for the secret-blob deployment environment."""
