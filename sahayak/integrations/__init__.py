"""External service integrations for Sahayak."""
