"""git credential helper backed by pass, the standard unix password manager."""
