"""Generate TypeScript type declarations from struct and enum descriptions."""

__version__ = "0.1.0"