"""Request-scoped context shared by logging and moderation stamps."""
