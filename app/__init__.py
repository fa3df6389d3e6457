"""HTTP API and command-line surfaces."""
