from tilecollapse.core.grid import Grid
from tilecollapse.core.model import CellView
from tilecollapse.io.render import cell_glyph, render_text


def test_cell_glyphs():
    glyphs = {"water": "~"}
    assert cell_glyph(CellView(0, 0, True, frozenset({"water"})), glyphs) == "~"
    assert cell_glyph(CellView(0, 0, True, frozenset({"sand"})), glyphs) == "s"
    assert cell_glyph(CellView(0, 0, True, frozenset())) == "!"
    assert cell_glyph(CellView(0, 0, False, frozenset({1, 2, 3}))) == "3"
    assert cell_glyph(CellView(0, 0, False, frozenset(range(12)))) == "+"


def test_render_text_layout():
    grid = Grid.create(3, 2, 4)
    cell = grid.cell_at(2, 1)
    cell.domain = {1}
    cell.resolved = True
    assert render_text(grid) == "444\n441"
