"""CrossForge HTTP API around the crossover engine."""
