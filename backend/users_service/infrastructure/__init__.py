"""Infrastructure Layer — logging setup and the in-memory UserService."""
