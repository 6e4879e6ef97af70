import click
from pydantic import ValidationError

from core.config import LibrarySettings
from core.utils.clock import ManualClock, SystemClock
from ..utils import build_service, configure_logging, print_summary

DEMO_TITLE = "Clean Code"
DEMO_AUTHOR = "Robert C. Martin"
DEMO_ISBN = "978-0132350884"
DEMO_USER = "John Smith"
DEMO_USER_ID = 1


@click.command()
@click.option('--days', type=click.IntRange(min=0), default=None,
              help='Loan period in days (defaults to LIBRARY_DEFAULT_LOAN_DAYS or 7)')
@click.option('--late-days', type=click.IntRange(min=0), default=0,
              help='Simulate returning the book this many days after it is due')
@click.option('--name', default=DEMO_USER, help='Name of the demo user')
@click.option('--verbose', '-v', is_flag=True, help='Show service log output')
def demo(days: int, late_days: int, name: str, verbose: bool):
    """
    Run a scripted circulation scenario against in-memory storage:
      1. Register a book and a user.
      2. Lend the book to the user.
      3. Return it, on time or LATE_DAYS after the due date.
    """
    configure_logging(verbose)
    try:
        settings = LibrarySettings.from_env()
    except ValidationError as e:
        raise click.ClickException(f"Invalid LIBRARY_* settings: {e}")

    loan_days = settings.default_loan_days if days is None else days
    clock = ManualClock() if late_days else SystemClock()
    service = build_service(clock=clock, settings=settings)

    click.echo("\n=== Registering ===")
    service.register_book(DEMO_TITLE, DEMO_AUTHOR, DEMO_ISBN)
    service.register_user(name, DEMO_USER_ID)

    click.echo("\n=== Borrowing ===")
    if not service.borrow_book(DEMO_USER_ID, DEMO_ISBN, loan_days):
        raise click.ClickException(f"Could not lend {DEMO_ISBN} to user {DEMO_USER_ID}")

    if late_days:
        clock.advance(days=loan_days + late_days)
        click.echo(click.style(f"... {loan_days + late_days} days later", fg='blue'))

    click.echo("\n=== Returning ===")
    fine = service.return_book(DEMO_USER_ID, DEMO_ISBN)
    if fine is None:
        raise click.ClickException(f"No active loan of {DEMO_ISBN} for user {DEMO_USER_ID}")

    color = 'red' if fine > 0 else 'green'
    click.echo(click.style("Fine generated: ", fg='blue') + click.style(f"{fine:.2f}", fg=color))
    print_summary(service)


if __name__ == '__main__':
    demo()
