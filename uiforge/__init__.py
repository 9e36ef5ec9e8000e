"""UI Forge - screenshot and prompt to HTML generation pipeline."""
