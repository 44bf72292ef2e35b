"""Infrastructure: backend clients, drivers, configuration and ingestion."""
