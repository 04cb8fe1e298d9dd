"""Default configuration values and starter .diffreport.toml template."""

CONFIG_FILENAME = ".diffreport.toml"

DEFAULT_TOML = """\
# diffreport configuration
version = "1.0"

[diff]
autojunk = false          # treat very frequent lines as junk (difflib heuristic)
encoding = "utf-8"

[report]
format = "html"           # html | json | terminal
output = "diff-report.html"
title = "Diff report"
show_originals = true     # include the unannotated input files
show_legend = true
# stylesheet = "style.css"  # link an external stylesheet instead of inline CSS
"""
