import click

from cyclovander.batch import BatchRunner
from cyclovander.errors import CycloVanderError
from cyclovander.invariants import Mode
from cyclovander.progress import Spinner, TimingLogger

from .cli_dev import dev_cli


@click.group()
@click.option('-t', '--trace', is_flag=True, default=False,
              help='Compute the trace of H_n instead of the condition number.')
@click.pass_context
def main(ctx, trace):
    ctx.obj = Mode.from_flag(trace)


main.add_command(dev_cli)


@main.command('get')
@click.argument('n', type=int)
@click.pass_obj
def get_value(mode, n):
    """Print the result for a single n."""
    try:
        value = mode.compute(n)
    except CycloVanderError as exc:
        raise click.ClickException(str(exc))
    click.echo(value)


@main.command('table')
@click.option('-q', '--quiet', is_flag=True, default=False, help='Disable spinner.')
@click.option('-t', '--threads', default=1, type=click.IntRange(min=1),
              envvar='CYCLOVANDER_THREADS', show_default=True, help='Number of threads.')
@click.option('-v', '--verbose', is_flag=True, default=False,
              help='Log failed n and a summary to stderr.')
@click.argument('input_file', type=click.File('r'))
@click.pass_obj
def print_table(mode, quiet, threads, verbose, input_file):
    """Generate a table from a file with one n per line.

    Lines that are not unsigned integers are skipped. With more than one
    thread rows are printed as they finish, not in input order. Results
    for n above 5000 are slow and less precise; --verbose warns about them.
    """
    logger = lambda el: None
    if verbose:
        logger = TimingLogger(lambda el: click.echo(el, err=True)).log
    outfile = click.get_text_stream('stdout')
    if outfile.isatty():
        quiet = True
    click.echo(mode.header, file=outfile)
    spinner = None if quiet else Spinner().start()
    runner = BatchRunner(mode, threads=threads, progress=spinner, logger=logger)
    try:
        runner.run(input_file, outfile)
    finally:
        if spinner is not None:
            spinner.stop()
