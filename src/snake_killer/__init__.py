"""Snake Killer: bite the adversary snakes before they bite you."""
