"""Pet schema, URI matching and payload rules (no I/O)."""
