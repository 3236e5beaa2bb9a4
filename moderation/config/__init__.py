"""Process settings and logging setup."""
