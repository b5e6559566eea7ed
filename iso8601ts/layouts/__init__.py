"""
Layout definitions sub-package for iso8601ts.

Contains one YAML file per accepted ISO 8601 lexical layout. The loader
module (layout_registry.py in the parent package) reads these files and
compiles each into a regular expression at first use.
"""
