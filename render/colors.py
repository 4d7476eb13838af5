"""
organism_sim module: render/colors.py

Central color palette.
"""

BG = (25, 25, 112)  # midnight blue
PELLET = (80, 210, 140)
ORGANISM = (235, 235, 235)
HUD = (235, 235, 235)
PAUSED = (220, 90, 90)

# one tint per species id, cycled
SPECIES = [
    (235, 235, 235),
    (80, 120, 230),
    (220, 90, 90),
    (230, 200, 80),
    (170, 90, 220),
]
