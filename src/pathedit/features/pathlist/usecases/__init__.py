"""Use cases for editing, cleaning and analyzing path lists."""
