"""Render a Rust snippet with an inline theme: stylesheet plus one row per line."""

from scopepaint import Renderer, Theme

THEME = """
keyword = { fg = "purple", modifiers = ["bold"] }
string = "green"
comment = { fg = "grey", modifiers = ["italic"] }
"ui.text" = "white"
"ui.background" = { bg = "black" }

[palette]
purple = "#c678dd"
green = "#98c379"
grey = "#5c6370"
white = "#abb2bf"
black = "#282c34"
"""

SOURCE = b"""// greet
fn main() {
    println!("hello <world>");
}
"""

renderer = Renderer(Theme.from_helix(THEME))
print(f"<style>\n{renderer.css()}</style>")
for line in renderer.render("rust", SOURCE):
    print(f'<tr><td class="tsc-line">{line}</td></tr>')
