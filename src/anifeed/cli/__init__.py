"""AniFeed command-line interface."""
