"""StreamVault backend: hero selection, media embeds and advertisement requests."""

__version__ = "0.1.0"
