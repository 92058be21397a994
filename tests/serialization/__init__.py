"""Money and currency JSON converter tests."""
