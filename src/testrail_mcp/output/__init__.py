"""Output layer: rendering envelopes and the tool catalog for the CLI."""
