"""Instant runoff tabulation for ranked-choice elections."""
