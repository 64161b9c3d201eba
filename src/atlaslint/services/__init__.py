"""Service layer — file-level operations wrapping the validation engine."""
