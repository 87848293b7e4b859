"""Image quality metrics used to compare transform outputs."""
