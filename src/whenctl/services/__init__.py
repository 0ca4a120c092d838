"""Service layer — wraps the domain core in ServiceResult-returning operations."""
