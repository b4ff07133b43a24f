"""Read-only REST API over the content catalog and its audit."""
