"""Runtime layer: transport, pagination, and endpoint execution."""
