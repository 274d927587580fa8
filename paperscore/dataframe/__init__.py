"""Column-oriented tables with selection, grouping, rotation and text/CSV/Markdown/JSON output."""