"""Infrastructure Layer: concrete collaborators (HTTP adapter, hardeners) and logging setup."""
