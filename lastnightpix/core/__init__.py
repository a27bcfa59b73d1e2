"""Core domain helpers: key conventions, preview rendering and exceptions."""
