"""Session package: round state, configuration and the per-round state machine."""
