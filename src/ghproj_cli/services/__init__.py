"""Services module for ghproj CLI - configuration and API access."""
