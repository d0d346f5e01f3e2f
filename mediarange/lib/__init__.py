"""MediaRange Library: parsing, scoring and selection of media types."""
