"""Data Abstraction Layer (DAL) for reading database catalog metadata."""
