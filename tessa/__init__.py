"""Path and name resolution for the Tessa CLI and gateway."""
