"""Output layer — Rich rendering and JSON/quiet formatting of ServiceResult."""
