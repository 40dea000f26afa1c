"""Declarative speech rule sets, one module per locale."""
