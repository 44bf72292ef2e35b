"""Application layer: builders and services over the driver interface."""
