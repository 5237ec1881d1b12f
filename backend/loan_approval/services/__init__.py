"""Service layer for the approval workflow."""
