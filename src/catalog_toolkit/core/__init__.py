"""Core value models shared by the planner, collaborators and pipeline."""
