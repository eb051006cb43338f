"""Qt front-end for photopost."""
