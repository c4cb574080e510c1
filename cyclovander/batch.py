"""Compute an invariant for every n listed in a stream, on a thread pool.

Results are written as soon as a worker finishes them, so with more than
one thread the output order need not match the input order. With one
thread rows come out in input order.
"""
from collections import namedtuple
from concurrent.futures import FIRST_COMPLETED, ThreadPoolExecutor, wait

from cyclovander.errors import CycloVanderError, InvalidInputError
from cyclovander.trace import VALIDITY_BOUND
from cyclovander.utils.ntheory import MAX_N

BACKLOG_FACTOR = 4

# Failures confined to a single n; anything else aborts the batch.
ISOLATED_ERRORS = (CycloVanderError, ArithmeticError, ValueError, MemoryError)

BatchReport = namedtuple('BatchReport', ['read', 'skipped', 'written', 'failed'])


def parse_line(line):
    """Return the unsigned 64 bit integer on a line, or None."""
    token = line.strip()
    if token.startswith('+'):
        token = token[1:]
    if not token or not token.isascii() or not token.isdigit():
        return None
    n = int(token)
    if n > MAX_N:
        return None
    return n


class BatchRunner:

    def __init__(self, mode, threads=1, progress=None, logger=lambda x: None):
        if threads < 1:
            raise InvalidInputError(f'threads must be at least 1, got {threads}')
        self.mode = mode
        self.threads = threads
        self.progress = progress
        self.logger = logger

    def _compute(self, n):
        if self.progress is not None:
            self.progress.update(n)
        return self.mode.compute(n)

    def _emit(self, done, futures, outfile, counts):
        for future in [el for el in futures if el in done]:
            n = futures.pop(future)
            try:
                value = future.result()
            except ISOLATED_ERRORS as exc:
                counts['failed'] += 1
                self.logger(f'Skipped n={n}: {exc}')
                continue
            outfile.write(f'{n}\t{value}\n')
            counts['written'] += 1

    def run(self, lines, outfile):
        """Write one `n<TAB>result` line to outfile per valid line.

        Lines that are not plain unsigned integers are skipped without
        comment. Only this thread writes to outfile.
        """
        counts = {'read': 0, 'skipped': 0, 'written': 0, 'failed': 0}
        futures = {}
        backlog = self.threads * BACKLOG_FACTOR
        with ThreadPoolExecutor(max_workers=self.threads) as pool:
            for line in lines:
                counts['read'] += 1
                n = parse_line(line)
                if n is None:
                    counts['skipped'] += 1
                    continue
                if n > VALIDITY_BOUND:
                    self.logger(f'n={n} is above {VALIDITY_BOUND}, the result may be slow or imprecise')
                futures[pool.submit(self._compute, n)] = n
                if len(futures) >= backlog:
                    done, _ = wait(futures, return_when=FIRST_COMPLETED)
                    self._emit(done, futures, outfile, counts)
            while futures:
                done, _ = wait(futures, return_when=FIRST_COMPLETED)
                self._emit(done, futures, outfile, counts)
        self.logger(
            f'Finished {counts["written"]:,} of {counts["read"]:,} lines, '
            f'{counts["skipped"]:,} skipped, {counts["failed"]:,} failed'
        )
        return BatchReport(**counts)
