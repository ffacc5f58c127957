"""Project initializer.

Replaces template placeholders in a freshly created project, then removes
the launcher script that started it.
"""

__version__ = "0.1.0"
