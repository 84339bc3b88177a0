"""Shared building blocks: errors, logging, results, constants, protocols."""
