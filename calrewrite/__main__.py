"""
Package entry point.

Allows running the application via:

    python -m calrewrite

This simply forwards execution to calrewrite.cli.main().
"""

from calrewrite.cli import main

if __name__ == "__main__":
    main()
