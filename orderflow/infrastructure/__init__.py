"""Infrastructure layer - simulated providers, adapters, storage, logging and error handling."""
