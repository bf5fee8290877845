"""Agent module - pipeline orchestration and process entry."""
