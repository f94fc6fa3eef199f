"""Application layer wiring features into the public client."""
