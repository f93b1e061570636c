# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

from rootsolve import __version__

# -- Project information -----------------------------------------------

project = 'rootsolve'
copyright = '2026, rootsolve developers'  # noqa
author = 'rootsolve developers'
version = __version__  # Short X.Y version.
release = version

# -- General configuration ---------------------------------------------

extensions = ['sphinx.ext.autodoc',
              'sphinx.ext.autosummary',
              'sphinx.ext.doctest',
              'sphinx.ext.mathjax',
              'sphinx.ext.napoleon']
templates_path = ['_templates']
exclude_patterns = []

autodoc_default_options = {
    'members': True,
    'exclude-members': '__dict__, __module__, __weakref__'}
autosummary_generate = True

# -- Options for HTML output -------------------------------------------

html_theme = 'pydata_sphinx_theme'
