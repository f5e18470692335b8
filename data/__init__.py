"""Sample data and synthetic purchase generators."""
