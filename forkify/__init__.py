"""Forkify — a recipe browser whose views are kept in sync by engine.kernel."""
