"""Service layer — task operations returning ServiceResult."""
