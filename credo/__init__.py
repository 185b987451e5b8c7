"""credo: credential and session authentication core."""
