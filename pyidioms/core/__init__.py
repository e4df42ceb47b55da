"""Core constructs: generic container, validated balance holders, schemas."""
