"""Application service layer."""
