"""Ports: abstract contracts implemented by the infrastructure layer."""
