"""Core package: error kinds, error values and result types."""
