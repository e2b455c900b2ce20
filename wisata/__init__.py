"""Wisata: dual-track (admin / consumer) JWT cookie authentication for the tourism portal."""
