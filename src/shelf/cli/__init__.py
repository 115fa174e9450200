"""Console front end: bootstrap (composition root), commands, REPL and entry point."""
