"""Shared CLI plumbing: context, options, output and error handling."""
