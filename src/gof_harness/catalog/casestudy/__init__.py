"""Case studies - several patterns applied to one small system."""
