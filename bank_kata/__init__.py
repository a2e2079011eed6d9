"""A small in-memory bank account model."""
