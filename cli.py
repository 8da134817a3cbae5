import logging

import click

from config.constants import TermUnit
from config.settings import AMOUNT_PRECISION, RATE_PRECISION
from core.comparison import compare_extra_payments
from core.errors import LoanCalculationError
from core.export import schedule_to_frame
from core.schedule_generator import compute
from core.schema import LoanParameters
from utils.date_utils import years_to_periods


def loan_options(f):
    """Shared loan parameter options."""
    f = click.option('--term-unit', type=click.Choice([u.value for u in TermUnit]), default=TermUnit.MONTHS.value,
                     help='Whether --term is a number of months or years')(f)
    f = click.option('--term', type=int, required=True, help='Loan term')(f)
    f = click.option('--annual-rate', type=float, required=True, help='Annual interest rate in percent')(f)
    f = click.option('--principal', type=float, required=True, help='Loan principal')(f)
    return f


def _build_params(principal, annual_rate, term, term_unit):
    term_periods = years_to_periods(term) if term_unit == TermUnit.YEARS.value else term
    try:
        return LoanParameters(principal, annual_rate, term_periods)
    except LoanCalculationError as exc:
        raise click.BadParameter(str(exc))


def _amount(value):
    return f"{value:.{AMOUNT_PRECISION}f}"


@click.group()
@click.option('-v', '--verbose', is_flag=True, help='Enable debug logging')
def cli(verbose):
    """Loan amortization and extra-payment scenario calculator."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@loan_options
def payment(principal, annual_rate, term, term_unit):
    """Calculates the periodic payment and total interest."""
    params = _build_params(principal, annual_rate, term, term_unit)
    try:
        result = compute(params)
    except LoanCalculationError as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Periodic rate: {params.periodic_rate:.{RATE_PRECISION + 2}f}")
    click.echo(f"Periodic payment: {_amount(result.periodic_payment)}")
    click.echo(f"Total interest: {_amount(result.total_interest)}")
    click.echo(f"Total paid: {_amount(result.schedule.total_paid)}")
    click.echo(f"Periods: {result.schedule.periods}")


@cli.command()
@loan_options
@click.option('--start-date', type=click.DateTime(formats=['%Y-%m-%d']), help='Loan start date (YYYY-MM-DD), adds due dates')
@click.option('--repayment-day', type=int, default=1, help='Repayment day')
def schedule(principal, annual_rate, term, term_unit, start_date, repayment_day):
    """Generates an amortization schedule and outputs it as CSV."""
    params = _build_params(principal, annual_rate, term, term_unit)
    start_date_obj = start_date.date() if start_date else None
    try:
        result = compute(params)
    except LoanCalculationError as exc:
        raise click.ClickException(str(exc))
    df = schedule_to_frame(result.schedule, start_date_obj, repayment_day)
    click.echo(df.to_csv(index=False))


@cli.command()
@loan_options
@click.option('--extra', type=float, required=True, help='Extra amount paid every period')
def scenario(principal, annual_rate, term, term_unit, extra):
    """Shows how a constant extra payment accelerates payoff."""
    params = _build_params(principal, annual_rate, term, term_unit)
    try:
        result = compute(params, extra_payment=extra)
    except LoanCalculationError as exc:
        raise click.ClickException(str(exc))
    s = result.scenario
    click.echo(f"Original payment: {_amount(result.periodic_payment)}")
    click.echo(f"Extra payment: {_amount(s.extra_payment)}")
    click.echo(f"New payment: {_amount(s.accelerated_payment)}")
    click.echo(f"Periods to payoff: {s.periods_to_payoff} of {params.term_periods}")
    click.echo(f"Months saved: {s.months_saved}")
    click.echo(f"Interest saved: {_amount(s.interest_saved)}")


@cli.command('compare-extras')
@loan_options
@click.option('--extra', 'extras', type=float, multiple=True, required=True,
              help='Extra payment amount, repeat for several scenarios')
def compare_extras(principal, annual_rate, term, term_unit, extras):
    """Compares several extra payment amounts and outputs them as CSV."""
    params = _build_params(principal, annual_rate, term, term_unit)
    try:
        comp_df = compare_extra_payments(params, extras)
    except LoanCalculationError as exc:
        raise click.ClickException(str(exc))
    click.echo(comp_df.to_csv(index=False))


if __name__ == "__main__":
    cli()
