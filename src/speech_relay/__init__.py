"""Speech-to-speech translation service."""
