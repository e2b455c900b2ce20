"""Auth services: tracks, credential store, session issuing and role gate."""
