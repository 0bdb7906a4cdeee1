"""Day-by-day activity timeline built from a plain-text log."""
