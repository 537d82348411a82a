"""Core layer: configuration, constants, enums, errors and Result types."""
