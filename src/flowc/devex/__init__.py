"""Editor tooling for Flow."""
