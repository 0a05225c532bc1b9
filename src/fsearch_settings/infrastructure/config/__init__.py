"""Settings file location and the settings store."""
