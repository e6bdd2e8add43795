"""Service layer: unit engine and recipe transforms."""
