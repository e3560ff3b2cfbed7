"""Person record HTML converter: extract -> normalize -> render."""
