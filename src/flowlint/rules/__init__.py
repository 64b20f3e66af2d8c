"""Built-in rules, grouped by the preset that owns them."""
