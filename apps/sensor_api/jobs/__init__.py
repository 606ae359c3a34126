"""One-shot jobs."""
