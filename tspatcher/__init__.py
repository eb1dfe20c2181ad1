"""Fetch, patch, build and publish a fork of the TypeScript compiler."""

__version__ = "0.1.0"
