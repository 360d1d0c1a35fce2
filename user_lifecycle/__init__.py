"""User lifecycle core: create, fetch and deactivate user records."""
