"""Core building blocks for Sahayak flows."""
