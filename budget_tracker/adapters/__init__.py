"""Entry points wiring use cases to infrastructure."""
