from . import Tileset, register_tileset

@register_tileset
class Checkerboard(Tileset):
    name = "checkerboard"
    width = 8
    height = 8
    neighbors = {
        "black": ["white"],
        "white": ["black"],
    }
    glyphs = {"black": "#", "white": "o"}
    colors = {"black": "#000000", "white": "#FFFFFF"}
