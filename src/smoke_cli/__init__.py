"""Command-line front end for the smoke engine."""
