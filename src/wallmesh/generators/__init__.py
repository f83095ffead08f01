"""Grid layout, autotile pieces and wall profiles."""
