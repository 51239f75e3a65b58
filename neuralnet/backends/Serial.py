from .Backend import Backend


class Serial(Backend):
    """Run queued tasks one after another in the calling process."""

    def process(self):
        queue, self.queue = self.queue, []
        return [fn(*args) for fn, args in queue]
