"""Blog posts backend."""
