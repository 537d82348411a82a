"""Infrastructure layer: credentials, request building and HTTP clients."""
