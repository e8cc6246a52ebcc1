"""blogstore - blog posts kept as Markdown files with YAML front matter."""

__version__ = "1.0.0"
