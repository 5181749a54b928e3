"""Core infrastructure for gostrip: host identification, paths, config and errors."""
