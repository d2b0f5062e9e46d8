"""Entry point: python -m task_cli"""

from task_cli.cli.app import main

if __name__ == "__main__":
    main()
