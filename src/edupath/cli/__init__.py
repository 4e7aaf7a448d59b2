"""Command line interface for EduPath."""
