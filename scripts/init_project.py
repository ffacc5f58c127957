#!/usr/bin/env python3
"""Project initialization script.

Run this once from the root of a project created from the template. It asks
for the project-specific values, rewrites the placeholders, trims the README
and then deletes itself.

Usage:
    python init_project.py
"""

from initializer.main import app

if __name__ == "__main__":
    app()
