"""Energy and health panels plus shared layout helpers."""
