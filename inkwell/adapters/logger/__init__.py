"""Logger adapters implementing LoggerPort."""
