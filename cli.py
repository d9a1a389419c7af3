import logging
import os
import sys

import click

from presenter import describe, exit_code
from quadratic import solve
from selftest import run_self_test
from logs import configure_logging

log = logging.getLogger(__name__)

BANNER = "Solve square equation a * x^2 + b * x + c = 0"
PROMPT = "Input a, b and c"


def parse_coefficients(text):
    """First three whitespace separated numbers of text, or None."""
    if text is None:
        return None
    tokens = text.split()
    if len(tokens) < 3:
        return None
    try:
        return tuple(float(t) for t in tokens[:3])
    except ValueError:
        return None


def read_coefficients():
    while True:
        line = click.prompt(PROMPT, default='', show_default=False, prompt_suffix=': ')
        coefficients = parse_coefficients(line)
        if coefficients is not None:
            return coefficients
        click.echo("Malformed input, try again", err=True)


def report(a, b, c):
    result = solve(a, b, c)
    log.debug("solve(%r, %r, %r) -> %s", a, b, c, result.outcome.value)
    if result.ok:
        click.echo(describe(result))
    else:
        log.warning("solve(%r, %r, %r) failed: %s", a, b, c, result.error.name)
        click.echo(describe(result), err=True)
    return result


def print_self_test():
    summary = run_self_test()
    for line in summary.lines():
        click.echo(line)
    return summary


@click.group()
def cli():
    """Solve quadratic equations a * x^2 + b * x + c = 0."""


@cli.command('solve', context_settings={'ignore_unknown_options': True})
@click.argument('coefficients', nargs=-1)
@click.option('--self-test', is_flag=True, help="Run the self-test after solving.")
def solve_command(coefficients, self_test):
    """Solve for A B C, or ask for them when none are given."""
    if coefficients:
        parsed = parse_coefficients(' '.join(coefficients))
        if parsed is None or len(coefficients) != 3:
            raise click.BadParameter("expected three numbers A B C", param_hint='COEFFICIENTS')
    else:
        click.echo(BANNER)
        try:
            parsed = read_coefficients()
        except click.Abort:
            log.info("input closed before coefficients were read")
            raise

    result = report(*parsed)
    if self_test:
        click.echo()
        print_self_test()
    sys.exit(exit_code(result))


@cli.command('selftest')
def selftest_command():
    """Run the built-in table of solve cases."""
    summary = print_self_test()
    sys.exit(0 if summary.ok else 1)


def main():
    configure_logging(os.getenv('QUADSOLVE_LOG_LEVEL', 'WARNING'))
    cli()


if __name__ == '__main__':
    main()
