"""Search backend clients."""
