"""Authorization schemes and the OAuth 1.0a token exchange."""
