"""Display backends (pygame window, Pillow offscreen)."""
