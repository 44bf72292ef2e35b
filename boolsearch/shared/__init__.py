"""Cross-cutting helpers: logging and error types."""
