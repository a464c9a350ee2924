# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

# -- Project information -----------------------------------------------------

project = "geocoords"
copyright = "2024, geocoords developers"
author = "geocoords developers"
release = "0.1.0"

# -- General configuration ---------------------------------------------------

extensions = [
    "myst_parser",
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx_copybutton",
]

templates_path = ["_templates"]
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

source_suffix = {
    ".txt": "markdown",
    ".md": "markdown",
}

# -- Options for HTML output -------------------------------------------------

html_theme = "furo"
html_title = "geocoords Documentation"
html_theme_options = {
    "navigation_with_keys": True,
}

autoclass_content = "both"
autodoc_member_order = "bysource"
copybutton_prompt_text = "$"
copybutton_only_copy_prompt_lines = True
