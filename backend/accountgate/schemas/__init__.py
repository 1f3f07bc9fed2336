"""Request/response schemas for the HTTP boundary."""
