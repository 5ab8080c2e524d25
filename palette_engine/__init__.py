"""palette-engine: harmonious 5-colour palettes with locks, WCAG contrast and shareable state."""

__version__ = '0.1.0'
