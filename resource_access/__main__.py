"""Entry point for running resource-access as a module.

This allows the package to be executed as:
    python -m resource_access

It delegates to the CLI main function.
"""

from resource_access.cli.main import main

if __name__ == "__main__":
    main()
