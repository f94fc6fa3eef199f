"""Feature packages: operation dispatch and authentication."""
