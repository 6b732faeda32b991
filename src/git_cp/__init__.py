"""Interactive git cherry-pick helper."""
