import os
from concurrent.futures import ProcessPoolExecutor

from .Backend import Backend
from ..exceptions import ConfigurationError


class Pool(Backend):
    """
    Run queued tasks across a pool of worker processes.

    Tasks and their arguments must be picklable, so pass module level
    functions such as those in backends.tasks.
    """

    def __init__(self, workers=None, verbose=0):
        super().__init__()
        if workers is not None and workers < 1:
            raise ConfigurationError(f"Workers must be greater than 0, {workers} given.")
        self.workers = workers
        self.verbose = verbose

    def _resolve_workers(self, n):
        cpu = os.cpu_count() or 1
        if self.workers is None:
            return max(1, min(cpu, n))
        return max(1, min(self.workers, n))

    def process(self):
        queue, self.queue = self.queue, []
        if not queue:
            return []

        workers = self._resolve_workers(len(queue))
        if self.verbose > 0:
            print(f"[Pool] running {len(queue)} tasks on {workers} workers")

        if workers == 1:
            return [fn(*args) for fn, args in queue]

        with ProcessPoolExecutor(max_workers=workers) as pool:
            futures = [pool.submit(fn, *args) for fn, args in queue]
            # collect in submission order, not completion order
            return [future.result() for future in futures]

    def __repr__(self):
        return f"Pool(workers={self.workers})"
