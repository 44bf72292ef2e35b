"""Domain logic with no infrastructure dependencies."""
