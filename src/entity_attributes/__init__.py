"""Additional numeric entity attributes and the loot rerolls they drive."""
