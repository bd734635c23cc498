"""Files app — ownership transfer notifications."""
