"""The native words every Charm dictionary starts with."""
