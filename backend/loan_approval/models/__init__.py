"""Domain records and response schemas."""
