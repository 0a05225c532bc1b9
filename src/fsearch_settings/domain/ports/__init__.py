"""Ports (ABCs) implemented by the infrastructure layer."""
