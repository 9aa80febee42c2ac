"""Small helpers shared across the fx_bnr package."""
