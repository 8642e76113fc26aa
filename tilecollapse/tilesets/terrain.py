from . import Tileset, register_tileset

@register_tileset
class Terrain(Tileset):
    name = "terrain"
    width = 16
    height = 16
    neighbors = {
        "water": ["water", "sand"],
        "sand": ["water", "sand", "grass"],
        "grass": ["sand", "grass", "mountain"],
        "mountain": ["grass", "mountain"],
    }
    glyphs = {"water": "~", "sand": ".", "grass": '"', "mountain": "^"}
    colors = {"water": "#2196F3", "sand": "#FFD54F", "grass": "#4CAF50", "mountain": "#795548"}
