"""MarketGenius: AI marketing-content assistant service."""
