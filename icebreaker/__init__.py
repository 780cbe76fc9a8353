"""Ice Breaker Challenge: a multi-stage team puzzle game."""
