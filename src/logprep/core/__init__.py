"""Core domain: record model, builder and sanitizer."""
