"""Storage adapters for feeding the engine from a SQL database."""
