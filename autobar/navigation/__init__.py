"""Navbar and sidebar resolution over a documentation tree."""
