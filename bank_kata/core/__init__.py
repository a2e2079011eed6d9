"""Value types and helpers shared by the domain model."""
