"""Framework-independent route table primitives."""
