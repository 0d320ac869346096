"""Additional patterns that are not in the GoF book but come up constantly."""
