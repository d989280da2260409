"""HTTP routes for Forkify."""
