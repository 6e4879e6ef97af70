# cli/main.py
import click
from .commands.demo import demo

@click.group()
def cli():
    """Library Circulation CLI"""
    pass

cli.add_command(demo)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
