"""Command-line front end for helmet asset generation."""
