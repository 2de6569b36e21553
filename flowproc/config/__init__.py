"""Settings for flow processes, loaded from the environment (and a local .env)."""
