"""Terminal search-and-select components built on prompt_toolkit."""
