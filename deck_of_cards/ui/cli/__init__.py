"""命令行界面"""

from .cli_deck import cli, main

__all__ = ['cli', 'main']
