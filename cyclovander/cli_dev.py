import click
import pandas as pd

from time import perf_counter

from cyclovander.errors import CycloVanderError
from cyclovander.invariants import tr_h
from cyclovander.trace import h_residual, integrality_tolerance, trace_of_h
from cyclovander.utils.ntheory import phi

SMALL_FACTORS = [3, 15, 105, 1155]
PRIMES = [13, 103, 1153]


@click.group('dev')
def dev_cli():
    pass


@dev_cli.command('residual')
@click.option('-o', '--outfile', default='-', type=click.File('w'))
@click.argument('ns', type=int, nargs=-1, required=True)
def residual_table(outfile, ns):
    """Report how far the entries of H_n are from integers."""
    tbl = []
    for n in ns:
        try:
            residual = h_residual(n)
            tolerance = integrality_tolerance(n)
            tbl.append({
                'n': n,
                'phi': phi(n),
                'trace': trace_of_h(n),
                'residual': residual,
                'tolerance': tolerance,
                'within_tolerance': residual <= tolerance,
            })
        except CycloVanderError as exc:
            raise click.ClickException(str(exc))
    pd.DataFrame(tbl).to_csv(outfile, index=False)


@dev_cli.command('bench')
@click.option('-r', '--repeats', default=5, type=click.IntRange(min=1))
@click.option('-o', '--outfile', default='-', type=click.File('w'))
@click.argument('ns', type=int, nargs=-1)
def bench_trace(repeats, outfile, ns):
    """Time the trace of H_n, by default for small-factor n and primes."""
    if not ns:
        ns = SMALL_FACTORS + PRIMES
    tbl = []
    for n in ns:
        min_time = None
        for _ in range(repeats):
            start = perf_counter()
            try:
                tr_h(n)
            except CycloVanderError as exc:
                raise click.ClickException(str(exc))
            elapsed = perf_counter() - start
            if min_time is None or elapsed < min_time:
                min_time = elapsed
        click.echo(f'n={n}: {min_time:.5}s', err=True)
        tbl.append({'n': n, 'phi': phi(n), 'seconds': min_time})
    pd.DataFrame(tbl).to_csv(outfile, index=False)
