"""Components discovered by the scanner tests."""
