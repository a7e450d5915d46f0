# Tile and category constants centralized for modular imports
OPEN = 0
WALL = 1

# Colormap category marking a room cell; any larger value is a wall category
ROOM_CATEGORY = 0

__all__ = ["OPEN", "WALL", "ROOM_CATEGORY"]
